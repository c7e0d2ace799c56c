"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/feature.py

Features: occurrences of one entity inside a Component.

A SubComponent is the concrete Feature used to build structural hierarchy: it
points at the Component it instantiates (`instance_of`) and may position that
occurrence on the parent's Sequence through one or more Locations. If its own
`role` is empty, the effective role comes from the instantiated Component.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .contracts import ensure
from .errors import ContractError
from .identified import Identified
from .location import EntireSequence, Location, Range
from .namespaces import SBOL3_NS
from .uri import Uri, join_uri, parse_uri
from .vocabulary import Orientation, Role, Sense, Term, as_terms, orientation_sense, require_domains

if TYPE_CHECKING:
    from .design import Design


class RoleIntegration(Enum):
    OVERRIDE = SBOL3_NS + "overrideRoles"
    MERGE = SBOL3_NS + "mergeRoles"


@dataclass(frozen=True)
class Feature(Identified):
    role: frozenset[Term] = field(default_factory=frozenset)
    orientation: frozenset[Term] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        super().__post_init__()
        role = as_terms(self.role, Role)
        require_domains(role, (Role,), f"{type(self).__name__}.role")
        orientation = as_terms(self.orientation, Orientation)
        require_domains(orientation, (Orientation,), f"{type(self).__name__}.orientation")
        object.__setattr__(self, "role", role)
        object.__setattr__(self, "orientation", orientation)

    def senses(self) -> frozenset[Sense | None]:
        """Declared orientations by meaning; unknown URIs show up as None."""
        return frozenset(orientation_sense(t) for t in self.orientation)

    def identity_in(self, parent: Uri | None) -> Uri | None:
        if parent is None or self.display_id is None:
            return None
        return join_uri(parent, self.display_id)


@dataclass(frozen=True)
class SubComponent(Feature):
    instance_of: Uri | None = None
    role_integration_mode: RoleIntegration = RoleIntegration.OVERRIDE
    has_location: tuple[Location, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        ensure(self.instance_of is not None, "SubComponent requires instance_of", ContractError)
        object.__setattr__(self, "instance_of", parse_uri(self.instance_of))
        ensure(
            isinstance(self.role_integration_mode, RoleIntegration),
            "SubComponent.role_integration_mode must be a RoleIntegration",
        )
        locations = tuple(self.has_location)
        for i, loc in enumerate(locations):
            ensure(
                isinstance(loc, (Range, EntireSequence)),
                f"SubComponent.has_location[{i}] must be a Range or EntireSequence",
            )
        object.__setattr__(self, "has_location", locations)

    def role_integration(self, design: "Design") -> frozenset[Term]:
        """
        Effective role of this occurrence. OVERRIDE keeps the declared roles
        when there are any and otherwise inherits from the instantiated
        Component; MERGE unions both. An unresolved reference adds nothing.
        """
        from .component import Component

        target = design.get(self.instance_of)
        inherited = target.role if isinstance(target, Component) else frozenset()
        if self.role_integration_mode is RoleIntegration.MERGE:
            return self.role | inherited
        return self.role if self.role else inherited
