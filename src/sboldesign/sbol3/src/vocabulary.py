"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/vocabulary.py

URI-typed vocabulary terms used to classify SBOL3 objects.

Each closed domain is an Enum whose values are canonical URIs (SBOL3 spec,
section 6, tables 1-3). Anything outside the built-in tables is carried as an
ExternalTerm that remembers which domain it was declared for:

    Term = <Domain member> | ExternalTerm(domain, uri)

Resolution is pure: built-in members never fail, external terms were already
parsed when created. A raw URI string is looked up in every built-in table, so
a known URI always lands in its own domain; each slot then rejects terms from
domains it does not accept (`require_domains`).

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import InvalidUri, TypeConflict
from .namespaces import CHEBI_NS, EDAM_NS, GO_NS, SBO_NS, SBOL3_NS, SO_NS
from .uri import Uri, parse_uri


class Vocabulary(Enum):
    @property
    def uri(self) -> Uri:
        return parse_uri(self.value)

    @classmethod
    def other(cls, uri: str | Uri) -> "ExternalTerm":
        """Escape hatch for terms not in the built-in table."""
        return ExternalTerm.parse(cls, uri)

    @classmethod
    def lookup(cls, uri: str | Uri) -> Optional["Vocabulary"]:
        target = parse_uri(uri)
        for member in cls:
            if member.uri == target:
                return member
        return None


class EntityType(Vocabulary):
    """Physical entity representation branch of SBO."""

    DNA = SBO_NS + "0000251"
    RNA = SBO_NS + "0000250"
    PROTEIN = SBO_NS + "0000252"
    SIMPLE_CHEMICAL = SBO_NS + "0000249"
    NON_COVALENT_COMPLEX = SBO_NS + "0000253"
    FUNCTIONAL_ENTITY = SBO_NS + "0000241"


class Topology(Vocabulary):
    """Topology and strandedness attributes of SO; nucleic acids only."""

    LINEAR = SO_NS + "0000987"
    CIRCULAR = SO_NS + "0000988"
    SINGLE_STRANDED = SO_NS + "0000984"
    DOUBLE_STRANDED = SO_NS + "0000985"


class Role(Vocabulary):
    PROMOTER = SO_NS + "0000167"
    RBS = SO_NS + "0000139"
    CDS = SO_NS + "0000316"
    TERMINATOR = SO_NS + "0000141"
    GENE = SO_NS + "0000704"
    OPERATOR = SO_NS + "0000057"
    ENGINEERED_REGION = SO_NS + "0000804"
    MRNA = SO_NS + "0000234"
    EFFECTOR = CHEBI_NS + "35224"
    TRANSCRIPTION_FACTOR = GO_NS + "0003700"


class Orientation(Vocabulary):
    """
    Two senses, each reachable through an SO term and an SBOL3-namespace
    synonym. Compare with `orientation_sense`, never by URI.
    """

    INLINE = SO_NS + "0001030"
    REVERSE_COMPLEMENT = SO_NS + "0001031"
    INLINE_ALT = SBOL3_NS + "inline"
    REVERSE_COMPLEMENT_ALT = SBOL3_NS + "reverseComplement"


class Encoding(Vocabulary):
    """Textual format branch of EDAM."""

    NUCLEIC_ACID = EDAM_NS + "format_1207"
    PROTEIN = EDAM_NS + "format_1208"
    INCHI = EDAM_NS + "format_1197"
    SMILES = EDAM_NS + "format_1196"


BUILTIN_DOMAINS: tuple[type[Vocabulary], ...] = (EntityType, Topology, Role, Orientation, Encoding)


class Sense(Enum):
    INLINE = "inline"
    REVERSE_COMPLEMENT = "reverse_complement"


_SENSES = {
    Orientation.INLINE: Sense.INLINE,
    Orientation.INLINE_ALT: Sense.INLINE,
    Orientation.REVERSE_COMPLEMENT: Sense.REVERSE_COMPLEMENT,
    Orientation.REVERSE_COMPLEMENT_ALT: Sense.REVERSE_COMPLEMENT,
}


@dataclass(frozen=True)
class ExternalTerm:
    domain: type[Vocabulary]
    uri: Uri

    @classmethod
    def parse(cls, domain: type[Vocabulary], value: str | Uri) -> "ExternalTerm":
        return cls(domain=domain, uri=parse_uri(value))

    def __str__(self) -> str:
        return str(self.uri)


Term = Union[Vocabulary, ExternalTerm]


def resolve(term: Term | str) -> Uri:
    """
    Return the URI a term stands for. A bare string is treated as the escape
    value of an external term and must parse as an absolute URI.
    """
    if isinstance(term, Vocabulary):
        return term.uri
    if isinstance(term, ExternalTerm):
        return term.uri
    if isinstance(term, (str, Uri)):
        return parse_uri(term)
    raise InvalidUri(f"Cannot resolve {type(term).__name__} as a vocabulary term")


def domain_of(term: Term) -> type[Vocabulary]:
    if isinstance(term, ExternalTerm):
        return term.domain
    return type(term)


def canonical(term: Term) -> Term:
    """Replace an external term by the built-in member with the same URI, if any."""
    if isinstance(term, ExternalTerm):
        member = term.domain.lookup(term.uri)
        if member is not None:
            return member
    return term


def as_term(value: Term | str, *domains: type[Vocabulary]) -> Term:
    """
    Coerce a raw URI string into the built-in member with that URI, searching
    the given domains first and then every other built-in table. A URI no
    table knows becomes an ExternalTerm of the first domain given. The result
    may belong to a domain outside `domains`; `require_domains` checks that.
    """
    if isinstance(value, (Vocabulary, ExternalTerm)):
        return canonical(value)
    uri = parse_uri(value)
    for domain in domains + tuple(d for d in BUILTIN_DOMAINS if d not in domains):
        member = domain.lookup(uri)
        if member is not None:
            return member
    return ExternalTerm(domain=domains[0], uri=uri)


def as_terms(values: Iterable[Term | str] | None, *domains: type[Vocabulary]) -> frozenset[Term]:
    if values is None:
        return frozenset()
    if isinstance(values, (str, Uri, Vocabulary, ExternalTerm)):
        raise InvalidUri("expected a collection of terms, not a single term")
    return frozenset(as_term(v, *domains) for v in values)


def require_domains(terms: Iterable[Term], domains: tuple[type[Vocabulary], ...], ctx: str) -> None:
    foreign = sorted(getattr(t, "name", str(t)) for t in terms if domain_of(t) not in domains)
    if foreign:
        accepted = " and ".join(d.__name__ for d in domains)
        raise TypeConflict(f"{ctx} accepts {accepted} terms only; got {foreign}")


def orientation_sense(term: Term) -> Sense | None:
    """Meaning of an orientation term regardless of which synonym URI it uses."""
    member = Orientation.lookup(resolve(term))
    if member is None:
        return None
    return _SENSES[member]


def same_meaning(a: Term, b: Term) -> bool:
    sa, sb = orientation_sense(a), orientation_sense(b)
    if sa is not None or sb is not None:
        return sa == sb
    return resolve(canonical(a)) == resolve(canonical(b))
