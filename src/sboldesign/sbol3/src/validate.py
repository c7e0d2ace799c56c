"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/validate.py

Design-level validation passes. Every pass is a pure function over a Design
snapshot and returns a list of issues instead of stopping at the first one.

- composition: SubComponent.instance_of edges between Components are acyclic
- sequence mapping: a SubComponent's Location slice of the parent Sequence
  matches (or reverse-complements) the instantiated Component's Sequence of
  the same encoding; on an unspecified parent, overlapping placements agree
  and EntireSequence placements fix the length every other placement must fit
- provenance: derived_from and generated_by are each acyclic over every
  identified object (top levels and features with a display id)
- references (opt-in): structural references resolve inside the design

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .component import Component
from .config import ValidationConfig
from .design import Design
from .errors import (
    CompositionCycle,
    DesignIssue,
    ProvenanceCycle,
    SequenceMappingConflict,
    UnresolvedReference,
)
from .feature import Feature, SubComponent
from .graph import find_cycles
from .identified import Identified
from .location import Location, Range
from .sequence import Sequence, reverse_complement
from .uri import Uri
from .vocabulary import Sense, canonical, orientation_sense, resolve

log = logging.getLogger(__name__)


def validate_design(design: Design, config: Optional[ValidationConfig] = None) -> list[DesignIssue]:
    cfg = config or ValidationConfig()
    issues: list[DesignIssue] = []
    if cfg.require_resolved_references:
        issues.extend(check_references(design))
    issues.extend(check_composition_cycles(design))
    issues.extend(check_sequence_mappings(design, cfg))
    if cfg.check_provenance:
        issues.extend(check_provenance_cycles(design))
    if cfg.warn_on_alphabet:
        warn_nonconforming_sequences(design)
    log.info("validated %d top-level object(s): %d issue(s)", len(design), len(issues))
    return issues


# -------------------- composition --------------------


def check_composition_cycles(design: Design) -> list[CompositionCycle]:
    adjacency: dict[int, list[int]] = {}
    for h in design.handles():
        obj = design.at(h)
        if not isinstance(obj, Component):
            continue
        targets = []
        for sc in obj.sub_components():
            t = design.handle(sc.instance_of)
            if t is not None and isinstance(design.at(t), Component):
                targets.append(t)
        adjacency[h] = targets

    cycles = find_cycles(adjacency, sorted(adjacency))
    out = [CompositionCycle([design.at(h).identity for h in cycle]) for cycle in cycles]
    for issue in out:
        log.debug("%s", issue)
    return out


# -------------------- provenance --------------------


def _identified_objects(design: Design) -> list[tuple[Uri, Identified]]:
    out: list[tuple[Uri, Identified]] = []
    for obj in design:
        out.append((obj.identity, obj))
        if isinstance(obj, Component):
            for f in obj.has_feature:
                fid = obj.feature_identity(f)
                if fid is not None:
                    out.append((fid, f))
    return out


def check_provenance_cycles(design: Design) -> list[ProvenanceCycle]:
    nodes = _identified_objects(design)
    index = {uri: i for i, (uri, _) in enumerate(nodes)}
    out: list[ProvenanceCycle] = []
    for relation in ("derived_from", "generated_by"):
        adjacency = {
            i: [index[u] for u in sorted(getattr(obj, relation), key=str) if u in index]
            for i, (_, obj) in enumerate(nodes)
        }
        for cycle in find_cycles(adjacency, range(len(nodes))):
            out.append(ProvenanceCycle(relation, [nodes[i][0] for i in cycle]))
    return out


# -------------------- references --------------------


def check_references(design: Design) -> list[UnresolvedReference]:
    out: list[UnresolvedReference] = []
    for comp in design.components():
        for uri in sorted(comp.has_sequence, key=str):
            if not isinstance(design.get(uri), Sequence):
                out.append(UnresolvedReference(comp.identity, "has_sequence", uri))
        for sc in comp.sub_components():
            name = _feature_name(comp, sc)
            if not isinstance(design.get(sc.instance_of), Component):
                out.append(UnresolvedReference(name, "instance_of", sc.instance_of))
            for loc in sc.has_location:
                if not isinstance(design.get(loc.sequence), Sequence):
                    out.append(UnresolvedReference(name, "has_location.sequence", loc.sequence))
    return out


# -------------------- sequence mapping --------------------


@dataclass(frozen=True)
class _Placement:
    feature: str
    start: int
    forward: str  # child elements as they read on the parent's forward strand
    entire: bool = False

    @property
    def end(self) -> int:
        return self.start + len(self.forward)


def _feature_name(comp: Component, feature: Feature) -> str:
    fid = comp.feature_identity(feature)
    return str(fid) if fid is not None else f"{comp}#{feature.label}"


def _encoding_key(seq: Sequence) -> Uri | None:
    return None if seq.encoding is None else resolve(canonical(seq.encoding))


def _comparable(parent: Sequence, child: Sequence) -> bool:
    """A parent without an encoding (and so without elements) takes the child's."""
    if child.encoding is None:
        return False
    if parent.encoding is None:
        return True
    return _encoding_key(parent) == _encoding_key(child)


def _equal(a: str, b: str, cfg: ValidationConfig) -> bool:
    if cfg.case_sensitive_elements:
        return a == b
    return a.upper() == b.upper()


def _effective_sense(sc: SubComponent, loc: Location) -> tuple[Sense | None, str | None]:
    """Location orientation wins; otherwise the Feature's; default inline."""
    if loc.orientation is not None:
        sense = orientation_sense(loc.orientation)
        if sense is None:
            return None, f"unrecognized orientation {resolve(loc.orientation)}"
        return sense, None
    senses = sc.senses()
    if None in senses:
        return None, "feature declares an unrecognized orientation"
    if len(senses) > 1:
        return None, "feature declares both inline and reverse-complement orientation"
    if senses:
        return next(iter(senses)), None
    return Sense.INLINE, None


def _check_location(
    design: Design,
    comp: Component,
    sc: SubComponent,
    loc: Location,
    cfg: ValidationConfig,
    placed: dict[tuple[Uri, Uri | None], list[_Placement]],
) -> list[SequenceMappingConflict]:
    name = _feature_name(comp, sc)

    def conflict(reason: str) -> list[SequenceMappingConflict]:
        return [SequenceMappingConflict(comp.identity, name, loc.sequence, reason)]

    if loc.sequence not in comp.has_sequence:
        return conflict("location refers to a Sequence the Component does not list in has_sequence")
    parent = design.get(loc.sequence)
    if not isinstance(parent, Sequence):
        return []

    sense, problem = _effective_sense(sc, loc)
    if problem is not None:
        return conflict(problem)
    if sense is Sense.REVERSE_COMPLEMENT and parent.encoding is not None and not parent.is_nucleic_acid:
        return conflict(f"reverse complement is undefined for encoding {resolve(parent.encoding)}")

    parent_len = parent.length
    if isinstance(loc, Range) and parent_len is not None and loc.end > parent_len:
        return conflict(f"range {loc.start}..{loc.end} exceeds sequence length {parent_len}")
    start, end = loc.bounds(parent_len)

    child = design.get(sc.instance_of)
    if not isinstance(child, Component):
        return []

    out: list[SequenceMappingConflict] = []
    for uri in sorted(child.has_sequence, key=str):
        child_seq = design.get(uri)
        if not isinstance(child_seq, Sequence) or child_seq.elements is None:
            continue
        if not _comparable(parent, child_seq):
            continue
        if sense is Sense.REVERSE_COMPLEMENT and not child_seq.is_nucleic_acid:
            out.extend(conflict(f"reverse complement is undefined for encoding {resolve(child_seq.encoding)}"))
            continue
        if sense is Sense.REVERSE_COMPLEMENT:
            forward = reverse_complement(child_seq.elements)
        else:
            forward = child_seq.elements

        if parent.elements is not None:
            segment = parent.elements[start:end]
            if not _equal(segment, forward, cfg):
                expected = reverse_complement(segment) if sense is Sense.REVERSE_COMPLEMENT else segment
                out.extend(
                    conflict(f"{child_seq} has {child_seq.elements!r}; mapped slice gives {expected!r}")
                )
            continue

        if isinstance(loc, Range) and loc.length != len(forward):
            out.extend(conflict(f"range length {loc.length} differs from {child_seq} length {len(forward)}"))
            continue
        key = (loc.sequence, _encoding_key(child_seq))
        entire = not isinstance(loc, Range)
        placed.setdefault(key, []).append(_Placement(feature=name, start=start, forward=forward, entire=entire))
    return out


def _check_overlaps(
    comp: Component, placed: dict[tuple[Uri, Uri | None], list[_Placement]], cfg: ValidationConfig
) -> list[SequenceMappingConflict]:
    out: list[SequenceMappingConflict] = []

    def conflict(seq_uri: Uri, feature: str, reason: str) -> None:
        out.append(SequenceMappingConflict(comp.identity, feature, seq_uri, reason))

    for (seq_uri, _), placements in placed.items():
        # an EntireSequence placement fixes the parent's length
        whole = [p for p in placements if p.entire]
        if whole:
            first, n = whole[0], len(whole[0].forward)
            for p in whole[1:]:
                if len(p.forward) != n:
                    conflict(
                        seq_uri,
                        p.feature,
                        f"entire sequence length {len(p.forward)} differs from {first.feature} length {n}",
                    )
            for p in placements:
                if not p.entire and p.end > n:
                    conflict(
                        seq_uri,
                        p.feature,
                        f"range {p.start + 1}..{p.end} exceeds sequence length {n} implied by {first.feature}",
                    )

        for i, a in enumerate(placements):
            for b in placements[i + 1 :]:
                lo, hi = max(a.start, b.start), min(a.end, b.end)
                if lo >= hi:
                    continue
                if not _equal(a.forward[lo - a.start : hi - a.start], b.forward[lo - b.start : hi - b.start], cfg):
                    conflict(seq_uri, b.feature, f"disagrees with {a.feature} on positions {lo + 1}..{hi}")
    return out


def check_sequence_mappings(
    design: Design, config: Optional[ValidationConfig] = None
) -> list[SequenceMappingConflict]:
    cfg = config or ValidationConfig()
    out: list[SequenceMappingConflict] = []
    for comp in design.components():
        placed: dict[tuple[Uri, Uri | None], list[_Placement]] = {}
        for sc in comp.sub_components():
            for loc in sc.has_location:
                out.extend(_check_location(design, comp, sc, loc, cfg, placed))
        out.extend(_check_overlaps(comp, placed, cfg))
    return out


# -------------------- advisory --------------------


def warn_nonconforming_sequences(design: Design) -> int:
    """Log sequences whose elements fall outside their IUPAC alphabet; returns the count."""
    flagged = 0
    for seq in design.sequences():
        bad = seq.nonconforming_characters()
        if bad:
            flagged += 1
            log.warning("%s: characters outside the %s alphabet: %s", seq, resolve(seq.encoding), sorted(bad))
    return flagged
