"""Tag balance checks for short annotated text fields.

This is a nesting checker, not a markup parser: there is no notion of void
elements, self-closing tags or comments, so ``<br>`` is reported as an
unclosed tag.
"""

from __future__ import annotations

from .errors import TagBalanceError

OPEN_BRACKET = "<"
CLOSE_BRACKET = ">"
CLOSING_TAG_PREFIX = "/"


def validate_tags(text: str) -> TagBalanceError | None:
    """Return the first tag balance violation in ``text``, or ``None``."""
    open_tags: list[str] = []
    offset = 0
    while offset < len(text):
        start = text.find(OPEN_BRACKET, offset)
        if start == -1:
            break
        if CLOSE_BRACKET in text[offset:start]:
            return TagBalanceError("found closing bracket before an opening bracket")

        end = text.find(CLOSE_BRACKET, start)
        if end == -1:
            return TagBalanceError("found opening bracket but no closing bracket")

        tag = _tag_name(text[start + 1 : end])
        if not tag:
            return TagBalanceError("empty tag found")

        if tag.startswith(CLOSING_TAG_PREFIX):
            closing = tag[len(CLOSING_TAG_PREFIX) :]
            if not open_tags:
                return TagBalanceError(f"unexpected close tag found: {closing}")
            if open_tags[-1] != closing:
                return TagBalanceError(f"mismatched close tag found: {open_tags[-1]} != {closing}")
            open_tags.pop()
        else:
            open_tags.append(tag)
        offset = end + 1

    if open_tags:
        return TagBalanceError(f"not all tags closed: [{' '.join(open_tags)}]")
    return None


def is_balanced(text: str) -> bool:
    """Return whether all tags in ``text`` open and close in order."""
    return validate_tags(text) is None


def _tag_name(inner: str) -> str:
    """Reduce bracket contents to a tag name, dropping anything after a space."""
    name = inner.strip()
    space = name.find(" ")
    if space >= 0:
        name = name[:space]
    return name
