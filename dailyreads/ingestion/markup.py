"""Regex helpers for pulling text out of feed markup.

These are deliberately not an XML parser. ``extract_tag`` returns the first
non-greedy match only, so nested or malformed markup can produce the wrong
boundaries. Ranking on real feeds depends on this behaviour; keep it.
"""

import re
from functools import lru_cache

_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")

# &amp; goes last so "&amp;lt;" and "&amp;quot;" decode once, to "&lt;" and "&quot;"
_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&amp;", "&"),
)


@lru_cache(maxsize=32)
def _tag_pattern(tag_name: str) -> re.Pattern:
    name = re.escape(tag_name)
    return re.compile(rf"<{name}[^>]*>(.*?)</{name}>", re.IGNORECASE | re.DOTALL)


def extract_tag(fragment: str, tag_name: str) -> str:
    """Return the raw inner text of the first ``<tag_name>`` element, or ``""``."""
    match = _tag_pattern(tag_name).search(fragment)
    return match.group(1) if match else ""


def clean_text(raw: str) -> str:
    """Unwrap CDATA, strip tags, decode the basic entities and trim."""
    text = _CDATA_RE.sub(r"\1", raw)
    text = _TAG_RE.sub("", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text.strip()
