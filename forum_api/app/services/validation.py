"""
Input checks shared by the question and answer services.

These helpers run before any store access so malformed input never
reaches the database.
"""

import re
from typing import Any, Optional, Tuple

from forum_api.app.core.exceptions import InvalidIdentifier, ValidationError

ANSWER_MAX_LENGTH = 300

_IDENTIFIER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_ID = 2 ** 63 - 1


def parse_identifier(value: Any) -> int:
    """Return ``value`` as a question ID or raise ``InvalidIdentifier``.

    Accepts ints and decimal strings such as ``"42"``, ``" 42 "`` or
    ``"-3"``.  Booleans, floats, fractions and values outside the
    store's 64-bit integer range are rejected.
    """
    if isinstance(value, bool):
        raise InvalidIdentifier()
    if isinstance(value, str) and _IDENTIFIER_RE.fullmatch(value.strip()):
        value = int(value.strip())
    if isinstance(value, int) and -_MAX_ID <= value <= _MAX_ID:
        return value
    raise InvalidIdentifier()


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_encodable(value: str) -> bool:
    """Lone surrogates survive JSON decoding but cannot be stored as UTF-8."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def require_text(*values: Any) -> None:
    """Raise ``ValidationError`` unless every value is a non-blank, storable string."""
    if any(is_blank(value) or not is_encodable(value) for value in values):
        raise ValidationError()


def validate_answer_content(content: Any) -> str:
    """Check that answer content has between 1 and 300 characters."""
    require_text(content)
    if len(content) > ANSWER_MAX_LENGTH:
        raise ValidationError(
            f"Answer content must be at most {ANSWER_MAX_LENGTH} characters."
        )
    return content


def normalize_filters(title: Optional[str], category: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return casefolded search filters, ``None`` for each absent one.

    A blank filter counts as absent.  At least one filter is required.
    """
    title_filter = None if is_blank(title) else title.casefold()
    category_filter = None if is_blank(category) else category.casefold()
    if title_filter is None and category_filter is None:
        raise ValidationError("Invalid search parameters.")
    if not all(is_encodable(f) for f in (title_filter, category_filter) if f is not None):
        raise ValidationError("Invalid search parameters.")
    return title_filter, category_filter
