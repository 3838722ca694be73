"""Light markdown → HTML conversion for reader output.

Only the handful of constructs clean-reader output commonly uses are
handled; everything else is passed through untouched.

The output is not sanitized: raw HTML and link targets such as
``javascript:`` URLs reach the fragment as written. Callers that render it
in a browser should sanitize it first.
"""

import re
from typing import Tuple

# Applied in order; bold must run before italic, images before links.
_SUBSTITUTIONS = (
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\)"), r'<img src="\2" alt="\1">'),
    (re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)"), r'<a href="\2" target="_blank" rel="noopener">\1</a>'),
)

_CONTENT_MARKER = "Markdown Content:"


def markdown_to_html(markdown: str) -> str:
    """Convert headings, emphasis, images and links; newlines become <br>."""
    html = markdown.replace("\r\n", "\n")
    for pattern, replacement in _SUBSTITUTIONS:
        html = pattern.sub(replacement, html)
    return html.replace("\n", "<br>")


def split_reader_document(text: str) -> Tuple[str, str]:
    """
    Split proxy output into ``(title, body)``.

    The proxy prefixes the page with ``Title:``, ``URL Source:`` and
    similar lines before a ``Markdown Content:`` marker. Without the
    marker the whole text is the body and the first ``# `` heading, if
    any, is the title.
    """
    title = ""
    body = text

    if _CONTENT_MARKER in text:
        header, body = text.split(_CONTENT_MARKER, 1)
        for line in header.splitlines():
            if line.startswith("Title:"):
                title = line[len("Title:"):].strip()
                break
    else:
        for line in text.splitlines():
            if line.startswith("# "):
                title = line[2:].strip()
                break

    return title, body.strip()
