"""Normalize and validate comment text before storage."""
import re

import bleach

from labbook.core.exceptions import InputTooShort
from labbook.core.models.comment import MIN_LENGTH
from labbook.i18n import _

__all__ = ["prepare", "nl2br"]

_LINE_BREAK_RE = re.compile(r"\r\n|\n\r|\r")


def nl2br(text: str) -> str:
    """Insert ``<br />`` before each line break.

    Line breaks are normalized to ``\\n`` first.
    """
    text = _LINE_BREAK_RE.sub("\n", text)
    return text.replace("\n", "<br />\n")


def prepare(raw: str, minimum: int = MIN_LENGTH) -> str:
    """Return `raw` ready to be stored as a comment body.

    Surrounding whitespace and HTML tags are removed, line breaks converted to
    ``<br />`` + newline.

    :raise InputTooShort: if the result is shorter than `minimum` characters.
    """
    text = _LINE_BREAK_RE.sub("\n", (raw or "").strip())
    text = bleach.clean(text, tags=frozenset(), attributes={}, strip=True)
    text = nl2br(text)

    if len(text) < minimum:
        msg = _("Input is too short! (minimum: %(minimum)d)", minimum=minimum)
        raise InputTooShort(msg, minimum)

    return text
