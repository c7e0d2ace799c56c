"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/tests/conftest.py

Shared builders for sbol3 tests.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import pytest

from sboldesign.sbol3.src.component import Component
from sboldesign.sbol3.src.feature import SubComponent
from sboldesign.sbol3.src.location import Range
from sboldesign.sbol3.src.sequence import Sequence
from sboldesign.sbol3.src.vocabulary import EntityType, Encoding

NS = "https://example.org/lab"


def ref(display_id: str) -> str:
    return f"{NS}/{display_id}"


@pytest.fixture
def ns() -> str:
    return NS


@pytest.fixture
def make_sequence():
    def _make(display_id: str, elements: str | None, encoding=Encoding.NUCLEIC_ACID, **kw) -> Sequence:
        return Sequence(
            display_id=display_id,
            has_namespace=NS,
            elements=elements,
            encoding=encoding,
            **kw,
        )

    return _make


@pytest.fixture
def make_dna():
    def _make(display_id: str, *, sequences=(), features=(), types=(), **kw) -> Component:
        return Component(
            display_id=display_id,
            has_namespace=NS,
            type={EntityType.DNA, *types},
            has_sequence={ref(s) for s in sequences},
            has_feature=tuple(features),
            **kw,
        )

    return _make


@pytest.fixture
def make_sub():
    def _make(display_id: str, instance_of: str, *, seq: str | None = None, start=None, end=None, **kw):
        locations = ()
        if seq is not None:
            locations = (Range(sequence=ref(seq), start=start, end=end),)
        return SubComponent(display_id=display_id, instance_of=ref(instance_of), has_location=locations, **kw)

    return _make
