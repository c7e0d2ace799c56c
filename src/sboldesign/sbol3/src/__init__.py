"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/__init__.py

SBOL3 entity model: vocabulary terms, identified objects, sequences, features,
components, the Design arena and its validation passes.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from .component import Component, check_component_type
from .config import ConfigError, LoggingConfig, Sbol3Config, ValidationConfig, load_config
from .design import Design
from .errors import (
    CompositionCycle,
    ContractError,
    DesignError,
    DesignIssue,
    DesignValidationError,
    InvalidDisplayId,
    InvalidTopologyPlacement,
    InvalidUri,
    MissingEncoding,
    MissingEntityType,
    MissingNamespace,
    ProvenanceCycle,
    Sbol3Error,
    SequenceMappingConflict,
    TypeConflict,
    UnresolvedReference,
)
from .feature import Feature, RoleIntegration, SubComponent
from .identified import Identified, TopLevel
from .location import EntireSequence, Location, Range
from .logging_setup import setup_logging, setup_logging_from_config
from .sequence import Sequence, reverse_complement
from .uri import Uri, join_uri, parse_uri
from .validate import (
    check_composition_cycles,
    check_provenance_cycles,
    check_references,
    check_sequence_mappings,
    validate_design,
)
from .vocabulary import (
    Encoding,
    EntityType,
    ExternalTerm,
    Orientation,
    Role,
    Sense,
    Term,
    Topology,
    Vocabulary,
    canonical,
    orientation_sense,
    resolve,
    same_meaning,
)

__all__ = [
    "Uri",
    "parse_uri",
    "join_uri",
    "Vocabulary",
    "EntityType",
    "Topology",
    "Role",
    "Orientation",
    "Encoding",
    "ExternalTerm",
    "Term",
    "Sense",
    "resolve",
    "canonical",
    "orientation_sense",
    "same_meaning",
    "Identified",
    "TopLevel",
    "Sequence",
    "reverse_complement",
    "Range",
    "EntireSequence",
    "Location",
    "Feature",
    "SubComponent",
    "RoleIntegration",
    "Component",
    "check_component_type",
    "Design",
    "validate_design",
    "check_composition_cycles",
    "check_sequence_mappings",
    "check_provenance_cycles",
    "check_references",
    "ValidationConfig",
    "LoggingConfig",
    "Sbol3Config",
    "ConfigError",
    "load_config",
    "setup_logging",
    "setup_logging_from_config",
    "Sbol3Error",
    "ContractError",
    "InvalidUri",
    "InvalidDisplayId",
    "MissingNamespace",
    "MissingEncoding",
    "TypeConflict",
    "MissingEntityType",
    "InvalidTopologyPlacement",
    "DesignError",
    "DesignIssue",
    "CompositionCycle",
    "SequenceMappingConflict",
    "ProvenanceCycle",
    "UnresolvedReference",
    "DesignValidationError",
]
