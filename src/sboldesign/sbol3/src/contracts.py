"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/contracts.py

Small contract helpers for strict construction-time validation.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from .errors import ContractError


def ensure(cond: bool, msg: str, exc: type[Exception] = ContractError) -> None:
    if not cond:
        raise exc(msg)

