"""Shared pieces for Rolimons response models.

Most Rolimons endpoints return records as positional JSON arrays whose
numbers are sometimes sent as strings (``[4843918, "Tetra Games", ...]``,
``["1533893", 0, 14900]``). The helpers here turn such arrays into
keyword dicts so pydantic can validate them field by field.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict


class RoliModel(BaseModel):
    """Base model for all decoded values: immutable, numbers allowed as names."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class ResponseEnvelope(BaseModel):
    """Fields every Rolimons JSON response carries."""

    model_config = ConfigDict(extra="ignore")

    success: bool


def code_to_int(code: Any) -> int:
    """Convert an integer-or-numeric-string code to ``int``.

    Raises:
        ValueError: If the code is not an integer or a numeric string.
    """
    if isinstance(code, bool):
        raise ValueError(f"expected an integer code, got boolean {code!r}")
    if isinstance(code, int):
        return code
    if isinstance(code, float) and code.is_integer():
        return int(code)
    if isinstance(code, str):
        try:
            return int(code.strip())
        except ValueError:
            raise ValueError(f"expected a numeric code, got {code!r}") from None
    raise ValueError(f"expected an integer code, got {type(code).__name__}")


def code_to_flag(code: Any) -> bool:
    """Convert a ``1`` / ``-1`` flag code to ``bool``."""
    value = code_to_int(code)
    if value == 1:
        return True
    if value == -1:
        return False
    raise ValueError(f"expected flag code 1 or -1, got {value}")


def unpack_codes(
    codes: Any,
    field_names: Sequence[str | None],
    allowed_lengths: Sequence[int] | None = None,
) -> dict[str, Any]:
    """Map a positional array onto field names.

    ``None`` entries in ``field_names`` mark positions that are not kept.
    Extra trailing codes are only accepted when their length is listed in
    ``allowed_lengths``.

    Raises:
        ValueError: If ``codes`` is not an array or has an unexpected length.
    """
    if not isinstance(codes, (list, tuple)):
        raise ValueError(f"expected an array, got {type(codes).__name__}")

    lengths = allowed_lengths or (len(field_names),)
    if len(codes) not in lengths:
        raise ValueError(
            f"expected an array of length {' or '.join(map(str, lengths))}, "
            f"got {len(codes)}"
        )

    return {
        name: code
        for name, code in zip(field_names, codes, strict=False)
        if name is not None
    }
