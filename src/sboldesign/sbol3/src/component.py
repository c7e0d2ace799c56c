"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/component.py

Component: the central SBOL3 entity (DNA, RNA, protein, chemical, complex or
abstract functional grouping).

Construction enforces the rules local to one Component:
  1. `type` holds at least one entity-type term, and the molecular categories
     (DNA, RNA, protein, simple chemical, non-covalent complex) never co-occur
  2. topology/strandedness terms appear only on DNA or RNA, at most one of
     linear/circular and at most one of single/double stranded
Composition cycles and sequence-mapping consistency span several Components
and are checked by validate.py over an assembled Design.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .contracts import ensure
from .errors import InvalidTopologyPlacement, MissingEntityType, TypeConflict
from .feature import Feature, SubComponent
from .identified import TopLevel
from .uri import Uri, parse_uris
from .vocabulary import EntityType, Role, Term, Topology, as_terms, domain_of, require_domains

EXCLUSIVE_ENTITY_TYPES = frozenset(
    {
        EntityType.DNA,
        EntityType.RNA,
        EntityType.PROTEIN,
        EntityType.SIMPLE_CHEMICAL,
        EntityType.NON_COVALENT_COMPLEX,
    }
)
NUCLEIC_ACID_TYPES = frozenset({EntityType.DNA, EntityType.RNA})
EXCLUSIVE_TOPOLOGY_GROUPS = (
    frozenset({Topology.LINEAR, Topology.CIRCULAR}),
    frozenset({Topology.SINGLE_STRANDED, Topology.DOUBLE_STRANDED}),
)


def _names(terms) -> list[str]:
    return sorted(getattr(t, "name", str(t)) for t in terms)


def check_component_type(types: frozenset[Term], ctx: str = "Component") -> None:
    foreign = [t for t in types if domain_of(t) not in (EntityType, Topology)]
    ensure(
        not foreign,
        f"{ctx}.type accepts entity-type and topology terms only; got {_names(foreign)}",
        TypeConflict,
    )
    entity = [t for t in types if domain_of(t) is EntityType]
    ensure(entity, f"{ctx}.type must include at least one entity-type term", MissingEntityType)

    exclusive = EXCLUSIVE_ENTITY_TYPES.intersection(entity)
    ensure(
        len(exclusive) <= 1,
        f"{ctx}.type declares conflicting entity types: {_names(exclusive)}",
        TypeConflict,
    )

    topology = [t for t in types if domain_of(t) is Topology]
    if not topology:
        return
    ensure(
        bool(NUCLEIC_ACID_TYPES.intersection(entity)),
        f"{ctx}.type has topology terms {_names(topology)} but is not DNA or RNA",
        InvalidTopologyPlacement,
    )
    for group in EXCLUSIVE_TOPOLOGY_GROUPS:
        clash = group.intersection(topology)
        ensure(
            len(clash) <= 1,
            f"{ctx}.type declares conflicting topology terms: {_names(clash)}",
            InvalidTopologyPlacement,
        )


@dataclass(frozen=True)
class Component(TopLevel):
    type: frozenset[Term] = field(default_factory=frozenset)
    role: frozenset[Term] = field(default_factory=frozenset)
    has_sequence: frozenset[Uri] = field(default_factory=frozenset)
    has_feature: tuple[Feature, ...] = ()
    has_constraint: frozenset[Uri] = field(default_factory=frozenset)
    has_interaction: frozenset[Uri] = field(default_factory=frozenset)
    has_interface: frozenset[Uri] = field(default_factory=frozenset)
    has_model: frozenset[Uri] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        super().__post_init__()
        types = as_terms(self.type, EntityType, Topology)
        check_component_type(types, ctx=f"Component {self.display_id!r}")
        object.__setattr__(self, "type", types)
        role = as_terms(self.role, Role)
        require_domains(role, (Role,), f"Component {self.display_id!r} role")
        object.__setattr__(self, "role", role)
        object.__setattr__(self, "has_sequence", parse_uris(self.has_sequence, "has_sequence"))
        features = tuple(self.has_feature)
        seen: set[str] = set()
        for i, f in enumerate(features):
            ensure(isinstance(f, Feature), f"Component.has_feature[{i}] must be a Feature")
            if f.display_id is None:
                continue
            ensure(
                f.display_id not in seen,
                f"Component {self.display_id!r} has more than one feature with display_id {f.display_id!r}",
            )
            seen.add(f.display_id)
        object.__setattr__(self, "has_feature", features)
        for prop in ("has_constraint", "has_interaction", "has_interface", "has_model"):
            object.__setattr__(self, prop, parse_uris(getattr(self, prop), prop))

    def entity_types(self) -> frozenset[Term]:
        return frozenset(t for t in self.type if domain_of(t) is EntityType)

    def topologies(self) -> frozenset[Term]:
        return frozenset(t for t in self.type if domain_of(t) is Topology)

    @property
    def is_nucleic_acid(self) -> bool:
        return bool(NUCLEIC_ACID_TYPES.intersection(self.type))

    def sub_components(self) -> Iterator[SubComponent]:
        for f in self.has_feature:
            if isinstance(f, SubComponent):
                yield f

    def feature_identity(self, feature: Feature) -> Uri | None:
        return feature.identity_in(self.identity)
