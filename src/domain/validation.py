"""
Favorites validation.

Limits are byte lengths of the UTF-8 encoding, matching the fixed storage
layout: a 50-character string of multi-byte characters does not fit a
50-byte field and is rejected.

Two stages:
- check_encodable: the candidate can be serialized at all (u64 number,
  UTF-8 text). Runs before the signed instruction bytes are built.
- check_limits: the serialized fields fit the record layout.

validate_favorites runs both and is the complete check for callers outside
the service.
"""

from __future__ import annotations

from src.domain.errors import ErrorCode, FavoritesValidationError
from src.domain.layout import MAX_COLOR_BYTES, MAX_HOBBIES, MAX_HOBBY_BYTES, U64_MAX


def _utf8_len(value: str) -> int | None:
    """Byte length of value's UTF-8 encoding, or None if it has none."""
    if not isinstance(value, str):
        return None
    try:
        return len(value.encode("utf-8"))
    except UnicodeEncodeError:
        return None


def check_number(number: int) -> FavoritesValidationError | None:
    if isinstance(number, bool) or not isinstance(number, int) or not 0 <= number <= U64_MAX:
        return FavoritesValidationError(
            code=ErrorCode.NUMBER_OUT_OF_RANGE,
            message=f"Number must be an integer between 0 and {U64_MAX}",
            field="number",
        )
    return None


def _invalid_text(field: str) -> FavoritesValidationError:
    return FavoritesValidationError(
        code=ErrorCode.INVALID_TEXT,
        message="String is not encodable as UTF-8",
        field=field,
    )


def check_encodable(number: int, color: str, hobbies: list[str]) -> list[FavoritesValidationError]:
    errors: list[FavoritesValidationError] = []

    number_error = check_number(number)
    if number_error:
        errors.append(number_error)

    if _utf8_len(color) is None:
        errors.append(_invalid_text("color"))

    for i, hobby in enumerate(hobbies):
        if _utf8_len(hobby) is None:
            errors.append(_invalid_text(f"hobbies.{i}"))

    return errors


def check_limits(color: str, hobbies: list[str]) -> list[FavoritesValidationError]:
    """
    Check encodable text against the storage limits.

    Every hobby is checked; one error is reported per offending entry.
    Text with no UTF-8 encoding is left to check_encodable.
    """
    errors: list[FavoritesValidationError] = []

    color_len = _utf8_len(color)
    if color_len is not None and color_len > MAX_COLOR_BYTES:
        errors.append(
            FavoritesValidationError(
                code=ErrorCode.COLOR_TOO_LONG,
                message="Color string is too long",
                field="color",
            )
        )

    if len(hobbies) > MAX_HOBBIES:
        errors.append(
            FavoritesValidationError(
                code=ErrorCode.TOO_MANY_HOBBIES,
                message="Too many hobbies",
                field="hobbies",
            )
        )

    for i, hobby in enumerate(hobbies):
        hobby_len = _utf8_len(hobby)
        if hobby_len is not None and hobby_len > MAX_HOBBY_BYTES:
            errors.append(
                FavoritesValidationError(
                    code=ErrorCode.HOBBY_TOO_LONG,
                    message="Hobby string is too long",
                    field=f"hobbies.{i}",
                )
            )

    return errors


def validate_favorites(number: int, color: str, hobbies: list[str]) -> list[FavoritesValidationError]:
    """
    Check a candidate record; never raises.

    Returns an empty list when the candidate can be stored.
    """
    return check_encodable(number, color, hobbies) + check_limits(color, hobbies)
