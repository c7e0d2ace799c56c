"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/__init__.py

SBOL3 package root exports for the model located under internal src/.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from .src.component import Component
from .src.config import Sbol3Config, ValidationConfig, load_config
from .src.design import Design
from .src.errors import DesignIssue, DesignValidationError, Sbol3Error
from .src.feature import RoleIntegration, SubComponent
from .src.location import EntireSequence, Range
from .src.logging_setup import setup_logging
from .src.sequence import Sequence
from .src.validate import validate_design
from .src.vocabulary import Encoding, EntityType, ExternalTerm, Orientation, Role, Topology, resolve

__all__ = [
    "Component",
    "SubComponent",
    "RoleIntegration",
    "Sequence",
    "Range",
    "EntireSequence",
    "Design",
    "validate_design",
    "EntityType",
    "Topology",
    "Role",
    "Orientation",
    "Encoding",
    "ExternalTerm",
    "resolve",
    "Sbol3Config",
    "ValidationConfig",
    "load_config",
    "setup_logging",
    "Sbol3Error",
    "DesignIssue",
    "DesignValidationError",
]
__version__ = "0.1.0"
