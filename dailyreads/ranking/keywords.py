"""Keyword families used by the article scorer.

All matching is plain lowercase substring matching, so "how" also hits
"show" and "watch" hits "watchmaker".
"""

# Title-only; any hit rejects the article outright
EXCLUDE_PATTERNS = (
    "gift guide", "gifts for", "gift ideas",
    "weekly update", "this week", "week in",
    "roundup", "round-up", "recap",
    "10 things", "5 ways", "best of", "top 10", "top 5",
    "listicle", "must-read", "must read",
    "trending", "viral", "hot take",
    "sponsored", "partner content",
    "newsletter", "briefing",
    "podcast", "video", "watch",
)

# Title + snippet
ESSAY_WORDS = (
    "essay", "reflection", "meditation", "contemplation", "exploration",
    "examination", "perspective", "thoughts on", "thinking about", "consider",
    "reconsidering",
)

# Title + snippet
LONGFORM_WORDS = (
    "deep dive", "in-depth", "long read", "comprehensive", "understanding",
    "meaning of", "nature of",
)

# Title-only
CLICKBAIT_WORDS = (
    "shocking", "unbelievable", "you won't believe", "this one trick",
    "breaking", "just in", "developing",
)

# Title-only
QUALITY_WORDS = (
    "how", "why", "what if", "understanding", "rethinking", "reimagining",
    "reconsidering", "beyond", "after",
)

# Title + snippet
DEPTH_WORDS = (
    "revolution", "transformation", "evolution", "crisis", "future of",
    "history of", "meaning of", "nature of", "question of", "problem of",
)
