"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/location.py

Locations position a Feature on one of its parent Component's Sequences.
Coordinates follow SBOL3: 1-based, inclusive at both ends.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .contracts import ensure
from .errors import ContractError
from .uri import Uri, parse_uri
from .vocabulary import Orientation, Term, as_term, require_domains


def _coerce_common(obj: "Range | EntireSequence") -> None:
    object.__setattr__(obj, "sequence", parse_uri(obj.sequence))
    if obj.orientation is not None:
        orientation = as_term(obj.orientation, Orientation)
        require_domains((orientation,), (Orientation,), f"{type(obj).__name__}.orientation")
        object.__setattr__(obj, "orientation", orientation)


@dataclass(frozen=True)
class Range:
    sequence: Uri
    start: int
    end: int
    orientation: Term | None = None

    def __post_init__(self) -> None:
        _coerce_common(self)
        ensure(isinstance(self.start, int) and isinstance(self.end, int), "Range.start/end must be int")
        ensure(self.start >= 1, f"Range.start must be >= 1 (got {self.start})", ContractError)
        ensure(self.end >= self.start, f"Range.end must be >= Range.start (got {self.start}..{self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def bounds(self, seq_len: int | None) -> tuple[int, int]:
        """0-based half-open slice bounds. `seq_len` is unused; it mirrors EntireSequence.bounds."""
        return self.start - 1, self.end


@dataclass(frozen=True)
class EntireSequence:
    sequence: Uri
    orientation: Term | None = None

    def __post_init__(self) -> None:
        _coerce_common(self)

    def bounds(self, seq_len: int | None) -> tuple[int, int | None]:
        return 0, seq_len


Location = Union[Range, EntireSequence]
