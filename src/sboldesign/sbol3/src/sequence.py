"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/sequence.py

Sequence: primary structure of a Component and how it is encoded.

- `elements is None` means "not yet determined"; `""` is an empty sequence
- `encoding` is required whenever `elements` is set
- IUPAC alphabet conformance is advisory only (SMILES/InChI use other alphabets)

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass

from .contracts import ensure
from .errors import ContractError, MissingEncoding
from .identified import TopLevel
from .vocabulary import Encoding, Term, as_term, canonical, require_domains

# IUPAC nucleotide codes (DNA and RNA), including ambiguity codes and gaps.
IUPAC_NUCLEIC_ACID = frozenset("ACGTURYSWKMBDHVN.-acgturyswkmbdhvn")
# IUPAC amino acids plus B/Z/J/X ambiguity, U/O, stop and gap.
IUPAC_PROTEIN = frozenset("ACDEFGHIKLMNPQRSTVWYBZJXUO*-acdefghiklmnpqrstvwybzjxuo")

_COMPLEMENT = str.maketrans(
    "ACGTURYSWKMBDHVNacgturyswkmbdhvn.-",
    "TGCAAYRSWMKVHDBNtgcaayrswmkvhdbn.-",
)


def reverse_complement(elements: str) -> str:
    """Reverse complement of an IUPAC nucleotide string; case is preserved."""
    return elements.translate(_COMPLEMENT)[::-1]


@dataclass(frozen=True)
class Sequence(TopLevel):
    elements: str | None = None
    encoding: Term | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        ensure(
            self.elements is None or isinstance(self.elements, str),
            "Sequence.elements must be a string or None",
            ContractError,
        )
        ensure(
            self.elements is None or self.encoding is not None,
            f"Sequence {self.display_id!r} sets elements without an encoding",
            MissingEncoding,
        )
        if self.encoding is not None:
            encoding = as_term(self.encoding, Encoding)
            require_domains((encoding,), (Encoding,), f"Sequence {self.display_id!r} encoding")
            object.__setattr__(self, "encoding", encoding)

    @property
    def is_specified(self) -> bool:
        return self.elements is not None

    @property
    def length(self) -> int | None:
        return None if self.elements is None else len(self.elements)

    @property
    def is_nucleic_acid(self) -> bool:
        return self.encoding is not None and canonical(self.encoding) is Encoding.NUCLEIC_ACID

    def nonconforming_characters(self) -> frozenset[str]:
        """
        Characters outside the IUPAC alphabet of the encoding. Empty for
        unspecified elements and for encodings without a fixed alphabet.
        """
        if self.elements is None or self.encoding is None:
            return frozenset()
        enc = canonical(self.encoding)
        if enc is Encoding.NUCLEIC_ACID:
            allowed = IUPAC_NUCLEIC_ACID
        elif enc is Encoding.PROTEIN:
            allowed = IUPAC_PROTEIN
        else:
            return frozenset()
        return frozenset(ch for ch in self.elements if ch not in allowed)
