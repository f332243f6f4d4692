"""
Layout models: parsed dimensions and the resolved player size.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mediaembed.exceptions import EmbedIssue

# Leading integer magnitude, then the first non-digit run as the unit
_DIMENSION_RE = re.compile(r"^(?P<magnitude>\d*)(?P<unit>\D*)")


@dataclass(frozen=True)
class Dimension:
    """A width or height split into integer magnitude and unit suffix."""

    magnitude: int
    unit: str = ""

    @classmethod
    def parse(cls, value: str) -> Dimension:
        """Split "640", "100%" or "30em" into magnitude and unit.

        Empty or non-numeric values give a magnitude of 0.
        """
        match = _DIMENSION_RE.match(value)
        magnitude = match.group("magnitude")
        return cls(int(magnitude) if magnitude else 0, match.group("unit"))

    def __bool__(self) -> bool:
        return self.magnitude != 0

    def __str__(self) -> str:
        return f"{self.magnitude}{self.unit}"


@dataclass
class ResolvedLayout:
    """Final player size.

    ``percentage_padding`` is only set in responsive mode, when the height
    could be expressed as a percentage of the width.
    """

    width: str | None
    height: str | None = None
    percentage_padding: str | None = None
    responsive: bool = False
    issues: list[EmbedIssue] = field(default_factory=list)

    @property
    def is_defined(self) -> bool:
        """Whether no size issue was reported."""
        return not any(i.category == "undefined_size" for i in self.issues)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "percentage_padding": self.percentage_padding,
            "responsive": self.responsive,
            "issues": [i.to_dict() for i in self.issues],
        }
