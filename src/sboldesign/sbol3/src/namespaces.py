"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/namespaces.py

Namespace prefixes for the ontologies SBOL3 vocabulary terms are drawn from.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

SBO_NS = "https://identifiers.org/SBO:"
SO_NS = "https://identifiers.org/SO:"
CHEBI_NS = "https://identifiers.org/CHEBI:"
GO_NS = "https://identifiers.org/GO:"
EDAM_NS = "https://identifiers.org/edam:"
SBOL3_NS = "https://sbols.org/v3#"
