#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/interpreters.py
"""Typed interpretation of raw attribute values.

The lenient parser stores every value as a string. The functions in this
module turn those strings into booleans, numbers, numeric arrays and
unit-tagged lengths used for page layout. None of them raise for badly
shaped data: booleans fall back to ``False``, lengths to ``0.0`` and arrays
to ``None``. Only a bad unit token passed by the caller is an error.

Examples
--------
    >>> get_boolean("Yes")
    True
    >>> get_int_values("[ 255, 128, 1 ]")
    [255, 128, 1]
    >>> round(get_float_with_unit("2p3", LengthUnit.INCH), 6)
    0.208333
    >>> round(get_float_with_unit("25.4 mm", "cm"), 6)
    2.54

"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar, Union

from textbridge.constants import (
    CICEROS_RE,
    FLOAT_PREFIX_RE,
    INT_PREFIX_RE,
    NUMBER_ONLY_RE,
    PICAS_RE,
    POINTS_PER_PICA,
    UNIT_ONLY_RE,
    UNIT_TO_INCH_FACTORS,
    WHITESPACE_RE,
    LengthUnit,
)
from textbridge.exceptions import ValidationError

logger = logging.getLogger(__name__)

UnitLike = Union[LengthUnit, str]

_NumberT = TypeVar("_NumberT", int, float)


def coerce_unit(unit: UnitLike, parameter_name: str = "unit") -> LengthUnit:
    """Return ``unit`` as a :class:`LengthUnit`.

    Raises
    ------
    ValidationError
        If ``unit`` is not one of the fixed unit tokens

    """
    if isinstance(unit, LengthUnit):
        return unit
    try:
        return LengthUnit(unit)
    except ValueError as e:
        raise ValidationError(
            f"Unknown length unit {unit!r}; expected one of {[u.value for u in LengthUnit]}",
            parameter_name=parameter_name,
            parameter_value=unit,
            original_error=e,
        ) from e


def parse_float(value: str) -> float | None:
    """Parse the leading decimal number of ``value``, ignoring anything after it.

    Returns None when ``value`` does not start with a number.

        >>> parse_float("12.5px")
        12.5
        >>> parse_float("px") is None
        True

    """
    match = FLOAT_PREFIX_RE.match(value.strip())
    if match is None:
        return None
    return float(match.group(0))


def parse_int(value: str) -> int | None:
    """Parse the leading base-10 integer of ``value``, ignoring anything after it."""
    match = INT_PREFIX_RE.match(value.strip())
    if match is None:
        return None
    return int(match.group(0))


def get_boolean(value: str | None) -> bool:
    """Interpret a value as a boolean.

    ``True`` when the trimmed value starts with ``y`` or ``t`` (any case) or
    with a non-zero digit; ``False`` otherwise, including for empty input.
    """
    if not value:
        return False

    text = str(value).strip()
    if not text:
        return False

    first_char = text[0].lower()
    if first_char in ("y", "t"):
        return True
    return first_char.isascii() and first_char.isdigit() and first_char != "0"


def _get_number_values(
    value: str | None,
    parse: Callable[[str], _NumberT | None],
    zero: _NumberT,
) -> list[_NumberT] | None:
    if not value:
        return None

    text = value.strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]

    numbers: list[_NumberT] = []
    for piece in text.split(","):
        piece = piece.strip()
        if not piece:
            numbers.append(zero)
            continue
        number = parse(piece)
        if number is None:
            logger.debug(f"Array element {piece!r} is not a number; discarding array {value!r}")
            return None
        numbers.append(number)

    return numbers


def get_float_values(value: str | None) -> list[float] | None:
    """Interpret a comma-separated value as a list of floats.

    Parameters
    ----------
    value : str or None
        Value such as ``"[ 255, 128.2, 1.7 ]"``. The enclosing brackets are
        optional. Empty elements count as ``0``.

    Returns
    -------
    list[float] or None
        The numbers, or None for empty input or when any element does not
        start with a number

    """
    return _get_number_values(value, parse_float, 0.0)


def get_int_values(value: str | None) -> list[int] | None:
    """Interpret a comma-separated value as a list of integers.

    Same rules as :func:`get_float_values`; each element is truncated to its
    leading integer, so ``"1.9"`` becomes ``1``.
    """
    return _get_number_values(value, parse_int, 0)


def get_unit(value: str | None, default: UnitLike = LengthUnit.NONE) -> LengthUnit:
    """Recognise a unit name.

    Parameters
    ----------
    value : str or None
        A unit as a user might write it: ``"``, ``in``, ``inches``, ``cm``,
        ``centimeter``, ``mm``, ``millimeters``, ``cicero``, ``pica``,
        ``px``, ``pixels``, ``pt``, ``points``...
    default : LengthUnit or str, default LengthUnit.NONE
        Returned when ``value`` is not recognised

    Returns
    -------
    LengthUnit

    Raises
    ------
    ValidationError
        If ``default`` is not a unit token

    """
    default_unit = coerce_unit(default, "default")
    if value is None:
        return default_unit

    text = str(value).strip().lower()

    if text == '"' or text.startswith("in"):
        return LengthUnit.INCH
    if text.startswith("cm") or text.startswith("cent"):
        return LengthUnit.CM
    if text.startswith("mm") or text.startswith("mill"):
        return LengthUnit.MM
    if text.startswith("cic"):
        return LengthUnit.CICERO
    if text.startswith("pic"):
        return LengthUnit.PICA
    if text.startswith("pix") or text == "px":
        return LengthUnit.PIXEL
    if text.startswith("poi") or text == "pt":
        return LengthUnit.POINT

    return default_unit


def resolve_unit_name(name: UnitLike) -> LengthUnit | None:
    """Resolve a unit token or a spelled-out unit name.

    Exact tokens (including ``"NONE"``) come first, then the lenient names
    :func:`get_unit` recognises. Returns None for anything else.

    """
    try:
        return LengthUnit(name)
    except ValueError:
        unit = get_unit(str(name), LengthUnit.NONE)
        return None if unit is LengthUnit.NONE else unit


def unit_to_inch_factor(unit: UnitLike) -> float:
    """Return how many inches one ``unit`` is. ``NONE`` and inch are both ``1.0``."""
    return UNIT_TO_INCH_FACTORS[coerce_unit(unit)]


def convert_length(magnitude: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convert a magnitude between units.

    When either unit is ``NONE`` the magnitude is returned unchanged.

        >>> round(convert_length(72, "pt", '"'), 6)
        1.0

    """
    source = coerce_unit(from_unit, "from_unit")
    target = coerce_unit(to_unit, "to_unit")
    if source is LengthUnit.NONE or target is LengthUnit.NONE:
        return float(magnitude)
    return magnitude * UNIT_TO_INCH_FACTORS[source] / UNIT_TO_INCH_FACTORS[target]


def get_float_with_unit(value: str | None, convert_to: UnitLike = LengthUnit.NONE) -> float:
    """Interpret a value as a length, optionally converting it.

    Whitespace is ignored everywhere in ``value``. Pica and cicero notation
    (``2p3`` is 2 picas and 3 points, ``1c6`` is 1 cicero and 6 points) is
    recognised first; otherwise the value is a number followed by an
    optional unit (see :func:`get_unit`).

    Parameters
    ----------
    value : str or None
        Length such as ``"12.5mm"``, ``"-3 in"`` or ``"2p3"``
    convert_to : LengthUnit or str, default LengthUnit.NONE
        Target unit. No conversion happens when this is ``NONE`` or when the
        value carries no unit.

    Returns
    -------
    float
        The magnitude, or ``0.0`` when no number can be read

    Raises
    ------
    ValidationError
        If ``convert_to`` is not a unit token

    """
    target = coerce_unit(convert_to, "convert_to")
    if not value:
        return 0.0

    text = WHITESPACE_RE.sub("", str(value)).lower()

    sign = 1.0
    if text.startswith("-"):
        sign = -1.0
        text = text[1:]
    elif text.startswith("+"):
        text = text[1:]

    whole: int | None = None
    from_unit: LengthUnit | None = None
    for pattern, unit in ((PICAS_RE, LengthUnit.PICA), (CICEROS_RE, LengthUnit.CICERO)):
        match = pattern.match(text)
        if match:
            whole = int(match.group(1))
            text = match.group(2) or ""
            from_unit = unit
            break

    number_match = NUMBER_ONLY_RE.match(text)
    number = parse_float(number_match.group(1) if number_match else text)
    if number is None:
        logger.debug(f"No number found in length {value!r}")
        number = 0.0

    if whole is not None:
        number = whole + number / POINTS_PER_PICA
    else:
        unit_match = UNIT_ONLY_RE.match(text)
        from_unit = get_unit(unit_match.group(1) if unit_match else text)

    return sign * convert_length(number, from_unit, target)


__all__ = [
    "UnitLike",
    "coerce_unit",
    "convert_length",
    "get_boolean",
    "get_float_values",
    "get_float_with_unit",
    "get_int_values",
    "get_unit",
    "parse_float",
    "parse_int",
    "resolve_unit_name",
    "unit_to_inch_factor",
]
