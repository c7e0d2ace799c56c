"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/identified.py

Identified / TopLevel base attribute sets shared by every SBOL3 object.

Identified objects carry a display id, human-readable text and provenance
links (PROV-O `derived_from`, `generated_by`) plus OM measures. TopLevel
objects are the only ones addressable on their own; their identity is the
namespace joined with the display id. Provenance acyclicity is a design-level
rule and is checked in validate.py, not here.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .contracts import ensure
from .errors import InvalidDisplayId, MissingNamespace
from .uri import Uri, join_uri, parse_uri, parse_uris

DISPLAY_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _validate_display_id(value: str | None) -> None:
    if value is None:
        return
    ensure(isinstance(value, str), "display_id must be a string or None", InvalidDisplayId)
    ensure(
        DISPLAY_ID_RE.match(value) is not None,
        f"display_id must be alphanumeric/underscore and not start with a digit: {value!r}",
        InvalidDisplayId,
    )


@dataclass(frozen=True)
class Identified:
    display_id: str | None = None
    name: str | None = None
    description: str | None = None
    derived_from: frozenset[Uri] = field(default_factory=frozenset)
    generated_by: frozenset[Uri] = field(default_factory=frozenset)
    has_measure: frozenset[Uri] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        _validate_display_id(self.display_id)
        object.__setattr__(self, "derived_from", parse_uris(self.derived_from, "derived_from"))
        object.__setattr__(self, "generated_by", parse_uris(self.generated_by, "generated_by"))
        object.__setattr__(self, "has_measure", parse_uris(self.has_measure, "has_measure"))

    @property
    def label(self) -> str:
        """What to show a person: name, then display id, then the class name."""
        return self.name or self.display_id or type(self).__name__


@dataclass(frozen=True)
class TopLevel(Identified):
    has_namespace: Uri | None = None
    has_attachment: frozenset[Uri] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        super().__post_init__()
        ensure(
            self.has_namespace is not None,
            f"{type(self).__name__} {self.display_id!r} requires has_namespace",
            MissingNamespace,
        )
        object.__setattr__(self, "has_namespace", parse_uri(self.has_namespace))
        object.__setattr__(self, "has_attachment", parse_uris(self.has_attachment, "has_attachment"))

    @property
    def identity(self) -> Uri | None:
        if self.display_id is None:
            return None
        return join_uri(self.has_namespace, self.display_id)

    def __str__(self) -> str:
        identity = self.identity
        return str(identity) if identity is not None else self.label
