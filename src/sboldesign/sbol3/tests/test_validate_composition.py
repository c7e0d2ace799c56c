"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/tests/test_validate_composition.py

Tests for composition-cycle detection over SubComponent references.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from sboldesign.sbol3.src.config import ValidationConfig
from sboldesign.sbol3.src.design import Design
from sboldesign.sbol3.src.errors import CompositionCycle, UnresolvedReference
from sboldesign.sbol3.src.feature import SubComponent
from sboldesign.sbol3.src.graph import find_cycles
from sboldesign.sbol3.src.uri import parse_uri
from sboldesign.sbol3.src.validate import check_composition_cycles, check_references, validate_design

NS = "https://example.org/lab"


def _sub(display_id: str, target: str) -> SubComponent:
    return SubComponent(display_id=display_id, instance_of=f"{NS}/{target}")


def test_three_component_cycle_names_every_member(make_dna) -> None:
    design = Design(
        [
            make_dna("A", features=[_sub("b", "B")]),
            make_dna("B", features=[_sub("c", "C")]),
            make_dna("C", features=[_sub("a", "A")]),
        ]
    )
    issues = validate_design(design)
    assert len(issues) == 1
    cycle = issues[0]
    assert isinstance(cycle, CompositionCycle)
    assert set(cycle.cycle) == {parse_uri(f"{NS}/{x}") for x in "ABC"}
    assert list(cycle.cycle) == [parse_uri(f"{NS}/{x}") for x in "ABC"]
    for x in "ABC":
        assert f"{NS}/{x}" in str(cycle)


def test_diamond_is_not_a_cycle(make_dna) -> None:
    design = Design(
        [
            make_dna("D"),
            make_dna("B", features=[_sub("d", "D")]),
            make_dna("C", features=[_sub("d", "D")]),
            make_dna("A", features=[_sub("b", "B"), _sub("c", "C")]),
        ]
    )
    assert validate_design(design) == []


def test_self_instantiation_is_a_cycle(make_dna) -> None:
    design = Design([make_dna("A", features=[_sub("again", "A")])])
    issues = check_composition_cycles(design)
    assert [i.cycle for i in issues] == [(parse_uri(f"{NS}/A"),)]


def test_external_references_are_leaves(make_dna) -> None:
    design = Design([make_dna("A", features=[SubComponent(display_id="x", instance_of="https://elsewhere.org/part")])])
    assert check_composition_cycles(design) == []
    assert validate_design(design) == []


def test_unresolved_references_reported_when_required(make_dna, make_sub) -> None:
    sub = make_sub("x", "ghost", seq="missing_seq", start=1, end=2)
    design = Design([make_dna("A", sequences=["missing_seq"], features=[sub])])
    issues = validate_design(design, ValidationConfig(require_resolved_references=True))
    unresolved = [i for i in issues if isinstance(i, UnresolvedReference)]
    assert {i.prop for i in unresolved} == {"has_sequence", "instance_of", "has_location.sequence"}
    assert [str(i) for i in check_references(design)] == [str(i) for i in unresolved]


def test_find_cycles_reports_each_cycle_once() -> None:
    adjacency = {0: [1], 1: [2, 0], 2: [0]}
    cycles = find_cycles(adjacency, [0, 1, 2])
    assert sorted(sorted(c) for c in cycles) == [[0, 1], [0, 1, 2]]


def test_find_cycles_deep_chain_without_recursion_limit() -> None:
    n = 5000
    adjacency = {i: [i + 1] for i in range(n)}
    adjacency[n] = [0]
    cycles = find_cycles(adjacency, range(n + 1))
    assert len(cycles) == 1
    assert len(cycles[0]) == n + 1
