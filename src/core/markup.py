"""Flatten translation markup into wrapped plain text."""

from __future__ import annotations

import re
import textwrap

from bs4 import BeautifulSoup

from utils.constants import DEFAULT_WRAP_WIDTH

_BLOCK_TAGS = (
    "p", "div", "br", "li", "ul", "ol", "tr", "table", "dd", "dt",
    "h1", "h2", "h3", "h4", "h5", "h6", "blockquote",
)


def flatten_html(markup: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Convert an HTML fragment into plain text wrapped at *width* columns.

    Block elements and ``<br>`` start new lines; whitespace runs collapse and
    blank lines are dropped. Plain text passes through unchanged apart from
    wrapping.
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")

    lines = []
    for raw in soup.get_text().splitlines():
        line = re.sub(r"\s+", " ", raw).strip()
        if not line:
            continue
        if width > 0:
            lines.extend(textwrap.wrap(line, width=width) or [line])
        else:
            lines.append(line)
    return "\n".join(lines)
