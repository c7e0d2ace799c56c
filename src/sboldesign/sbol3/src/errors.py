"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/errors.py

Narrow, typed exceptions for the SBOL3 entity model. Construction problems are
raised immediately; design-level problems are collected as issue objects so a
caller can report every problem in one validation pass.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Sequence


class Sbol3Error(Exception):
    """Base class for all SBOL3 model errors."""

    pass


# ----- Construction-time (local to one object) -----


class ContractError(Sbol3Error):
    """An object could not be constructed because a local invariant failed."""

    pass


class InvalidUri(ContractError):
    pass


class InvalidDisplayId(ContractError):
    pass


class MissingNamespace(ContractError):
    pass


class MissingEncoding(ContractError):
    pass


class TypeConflict(ContractError):
    pass


class MissingEntityType(ContractError):
    pass


class InvalidTopologyPlacement(ContractError):
    pass


# ----- Design assembly -----


class DesignError(Sbol3Error):
    """Bad use of a Design: duplicate identities, edits after publish."""

    pass


# ----- Design-level issues (collected, never raised one at a time) -----


class DesignIssue(Sbol3Error):
    pass


class CompositionCycle(DesignIssue):
    def __init__(self, cycle: Sequence[object]):
        self.cycle = tuple(cycle)
        path = " -> ".join(str(u) for u in (*self.cycle, self.cycle[0])) if self.cycle else ""
        super().__init__(f"Feature composition cycle: {path}")


class ProvenanceCycle(DesignIssue):
    def __init__(self, relation: str, cycle: Sequence[object]):
        self.relation = relation
        self.cycle = tuple(cycle)
        path = " -> ".join(str(u) for u in (*self.cycle, self.cycle[0])) if self.cycle else ""
        super().__init__(f"{relation} cycle: {path}")


class SequenceMappingConflict(DesignIssue):
    def __init__(self, component: object, feature: object, sequence: object, reason: str):
        self.component = component
        self.feature = feature
        self.sequence = sequence
        self.reason = reason
        super().__init__(f"{component}: feature {feature} on sequence {sequence}: {reason}")


class UnresolvedReference(DesignIssue):
    def __init__(self, source: object, prop: str, target: object):
        self.source = source
        self.prop = prop
        self.target = target
        super().__init__(f"{source}.{prop} refers to {target}, which is not in the design")


class DesignValidationError(Sbol3Error):
    """Raised by Design.publish() with every issue found."""

    def __init__(self, issues: Sequence[DesignIssue]):
        self.issues = list(issues)
        lines = [f"{len(self.issues)} design issue(s):"] + [f"  - {i}" for i in self.issues]
        super().__init__("\n".join(lines))
