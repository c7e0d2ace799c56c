"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/tests/test_identified.py

Tests for Identified/TopLevel attributes and identities.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import dataclasses

import pytest

from sboldesign.sbol3.src.errors import InvalidDisplayId, InvalidUri, MissingNamespace
from sboldesign.sbol3.src.identified import Identified, TopLevel
from sboldesign.sbol3.src.uri import parse_uri


@pytest.mark.parametrize("display_id", ["pJ23100", "_x", "a1_b2", "A"])
def test_valid_display_ids(display_id: str) -> None:
    assert Identified(display_id=display_id).display_id == display_id


@pytest.mark.parametrize("display_id", ["1abc", "", "has space", "dash-ed", "dotted.id"])
def test_invalid_display_ids(display_id: str) -> None:
    with pytest.raises(InvalidDisplayId):
        Identified(display_id=display_id)


def test_provenance_links_become_uri_sets() -> None:
    obj = Identified(
        display_id="x",
        derived_from=["https://example.org/a", "https://example.org/a"],
        generated_by=("https://example.org/activity1",),
        has_measure={"https://example.org/m1"},
    )
    assert obj.derived_from == frozenset({parse_uri("https://example.org/a")})
    assert obj.generated_by == frozenset({parse_uri("https://example.org/activity1")})
    assert obj.has_measure == frozenset({parse_uri("https://example.org/m1")})


def test_provenance_links_must_be_uris() -> None:
    with pytest.raises(InvalidUri):
        Identified(derived_from=["not a uri"])


def test_attributes_are_read_only() -> None:
    obj = Identified(display_id="x", name="X")
    with pytest.raises(dataclasses.FrozenInstanceError):
        obj.name = "Y"  # type: ignore[misc]


def test_label_fallbacks() -> None:
    assert Identified(display_id="x", name="Pretty").label == "Pretty"
    assert Identified(display_id="x").label == "x"
    assert Identified().label == "Identified"


def test_toplevel_identity_joins_namespace_and_display_id() -> None:
    top = TopLevel(display_id="pJ23100", has_namespace="https://example.org/lab", has_attachment=["https://a/b"])
    assert top.identity == parse_uri("https://example.org/lab/pJ23100")
    assert str(top) == "https://example.org/lab/pJ23100"
    assert top.has_attachment == frozenset({parse_uri("https://a/b")})


def test_toplevel_without_display_id_has_no_identity() -> None:
    top = TopLevel(name="anon", has_namespace="https://example.org/lab")
    assert top.identity is None
    assert str(top) == "anon"


def test_toplevel_requires_namespace() -> None:
    with pytest.raises(MissingNamespace):
        TopLevel(display_id="x")
