"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/tests/test_component.py

Tests for Component construction-time type and topology rules.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import pytest

from sboldesign.sbol3.src.component import Component
from sboldesign.sbol3.src.errors import (
    ContractError,
    InvalidTopologyPlacement,
    MissingEntityType,
    TypeConflict,
)
from sboldesign.sbol3.src.feature import SubComponent
from sboldesign.sbol3.src.uri import parse_uri
from sboldesign.sbol3.src.vocabulary import EntityType, ExternalTerm, Role, Topology

NS = "https://example.org/lab"


def _component(*types, **kw) -> Component:
    return Component(display_id=kw.pop("display_id", "c"), has_namespace=NS, type=set(types), **kw)


def test_dna_and_protein_conflict() -> None:
    with pytest.raises(TypeConflict, match="conflicting entity types"):
        _component(EntityType.DNA, EntityType.PROTEIN)


@pytest.mark.parametrize(
    "a,b",
    [
        (EntityType.DNA, EntityType.RNA),
        (EntityType.RNA, EntityType.SIMPLE_CHEMICAL),
        (EntityType.PROTEIN, EntityType.NON_COVALENT_COMPLEX),
    ],
)
def test_molecular_categories_are_exclusive(a, b) -> None:
    with pytest.raises(TypeConflict):
        _component(a, b)


def test_functional_entity_combines_with_a_molecular_type() -> None:
    comp = _component(EntityType.PROTEIN, EntityType.FUNCTIONAL_ENTITY)
    assert comp.entity_types() == {EntityType.PROTEIN, EntityType.FUNCTIONAL_ENTITY}


def test_conflict_detected_through_uri_alias() -> None:
    with pytest.raises(TypeConflict):
        _component(EntityType.DNA, EntityType.other("https://identifiers.org/SBO:0000252"))


def test_entity_type_required() -> None:
    with pytest.raises(MissingEntityType):
        _component()
    with pytest.raises(MissingEntityType):
        _component(Topology.CIRCULAR)


def test_external_entity_type_counts() -> None:
    chebi = EntityType.other("https://identifiers.org/CHEBI:16541")
    comp = _component(chebi)
    assert comp.entity_types() == {chebi}
    assert not comp.is_nucleic_acid


def test_terms_from_other_domains_rejected_in_type() -> None:
    with pytest.raises(TypeConflict, match="entity-type and topology terms only"):
        _component(EntityType.DNA, Role.PROMOTER)


def test_topology_on_protein_is_misplaced() -> None:
    with pytest.raises(InvalidTopologyPlacement):
        _component(EntityType.PROTEIN, Topology.CIRCULAR)


def test_topology_on_dna_is_accepted() -> None:
    comp = _component(EntityType.DNA, Topology.CIRCULAR)
    assert comp.topologies() == {Topology.CIRCULAR}
    assert comp.is_nucleic_acid


def test_rna_may_declare_strandedness() -> None:
    comp = _component(EntityType.RNA, Topology.LINEAR, Topology.SINGLE_STRANDED)
    assert comp.topologies() == {Topology.LINEAR, Topology.SINGLE_STRANDED}


@pytest.mark.parametrize(
    "a,b",
    [(Topology.LINEAR, Topology.CIRCULAR), (Topology.SINGLE_STRANDED, Topology.DOUBLE_STRANDED)],
)
def test_conflicting_topology_terms(a, b) -> None:
    with pytest.raises(InvalidTopologyPlacement, match="conflicting topology"):
        _component(EntityType.DNA, a, b)


def test_raw_uri_strings_are_classified() -> None:
    comp = _component("https://identifiers.org/SBO:0000251", "https://identifiers.org/SO:0000988")
    assert comp.type == {EntityType.DNA, Topology.CIRCULAR}


def test_invalid_raw_uri_aborts_construction() -> None:
    with pytest.raises(ContractError):
        _component(EntityType.DNA, role={"nope nope"})


def test_roles_and_references() -> None:
    sub = SubComponent(display_id="p", instance_of=f"{NS}/promoter")
    comp = _component(
        EntityType.DNA,
        role={Role.ENGINEERED_REGION, "https://identifiers.org/SO:0000167"},
        has_sequence=[f"{NS}/seq"],
        has_feature=[sub],
        has_constraint=["https://example.org/lab/c/constraint1"],
        has_interaction=["https://example.org/lab/c/interaction1"],
        has_interface=["https://example.org/lab/c/interface1"],
        has_model=["https://example.org/lab/model1"],
    )
    assert comp.role == {Role.ENGINEERED_REGION, Role.PROMOTER}
    assert comp.has_sequence == {parse_uri(f"{NS}/seq")}
    assert comp.has_feature == (sub,)
    assert list(comp.sub_components()) == [sub]
    assert comp.feature_identity(sub) == parse_uri(f"{NS}/c/p")
    assert comp.has_model == {parse_uri("https://example.org/lab/model1")}
    assert len(comp.has_constraint) == len(comp.has_interaction) == len(comp.has_interface) == 1


def test_external_role_kept() -> None:
    role = ExternalTerm.parse(Role, "https://identifiers.org/GO:0003674")
    comp = _component(EntityType.PROTEIN, role={role})
    assert comp.role == {role}


def test_has_feature_entries_must_be_features() -> None:
    with pytest.raises(ContractError, match="must be a Feature"):
        _component(EntityType.DNA, has_feature=["https://example.org/lab/f"])


def test_known_role_uri_string_is_rejected_in_type() -> None:
    with pytest.raises(TypeConflict, match="entity-type and topology terms only"):
        _component(EntityType.DNA, Role.PROMOTER.value)
    with pytest.raises(TypeConflict):
        _component(Role.PROMOTER.value)


def test_role_rejects_terms_from_other_domains() -> None:
    with pytest.raises(TypeConflict, match="Role terms only"):
        _component(EntityType.DNA, role={Topology.CIRCULAR})
    with pytest.raises(TypeConflict, match="Role terms only"):
        _component(EntityType.DNA, role={EntityType.DNA.value})


def test_duplicate_feature_display_ids_rejected() -> None:
    a = SubComponent(display_id="p", instance_of=f"{NS}/one")
    b = SubComponent(display_id="p", instance_of=f"{NS}/two")
    with pytest.raises(ContractError, match="more than one feature with display_id 'p'"):
        _component(EntityType.DNA, has_feature=(a, b))


def test_features_without_display_id_may_repeat() -> None:
    a = SubComponent(instance_of=f"{NS}/one")
    b = SubComponent(instance_of=f"{NS}/two")
    assert len(_component(EntityType.DNA, has_feature=(a, b)).has_feature) == 2
