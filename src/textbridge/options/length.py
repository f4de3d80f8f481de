#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textbridge/options/length.py
"""Options for unit-tagged length interpretation."""

from __future__ import annotations

from dataclasses import dataclass, field

from textbridge.constants import LengthUnit
from textbridge.interpreters import resolve_unit_name
from textbridge.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class LengthOptions(CloneFrozenMixin):
    """Configuration options for length conversion.

    Parameters
    ----------
    default_unit : LengthUnit, default = LengthUnit.NONE
        Unit that magnitudes are converted to when no unit is requested.
        Token strings such as ``"mm"`` and unit names such as ``"inches"`` are
        accepted and stored as the enum.

    """

    default_unit: LengthUnit = field(
        default=LengthUnit.NONE,
        metadata={"help": "Target unit for converted lengths", "choices": [u.value for u in LengthUnit]},
    )

    def __post_init__(self) -> None:
        unit = resolve_unit_name(self.default_unit)
        if unit is None:
            choices = [u.value for u in LengthUnit]
            raise ValueError(f"default_unit must be a unit name or one of {choices}, got {self.default_unit!r}")
        object.__setattr__(self, "default_unit", unit)
