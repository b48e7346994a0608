"""
PACTS: design-by-contract preconditions read from docstrings
"""

__version__ = "0.1.0"

from .core.errors import (
    ConditionLookupError,
    ContractError,
    ParameterIndexError,
    PreconditionViolation,
    UnrecognizedCheck,
)
from .core.models import CheckKind, CheckResult, ConditionKind, PreconditionDescriptor
from .extractor import ConditionExtractor, parse_docstring
from .pact import Pact, contract, pact
from .registry import CheckRegistry, default_registry
from .router import ContractRouter, basic_check, guard

__all__ = [
    "Pact",
    "pact",
    "contract",
    "guard",
    "basic_check",
    "parse_docstring",
    "ConditionExtractor",
    "ContractRouter",
    "CheckRegistry",
    "default_registry",
    "CheckKind",
    "CheckResult",
    "ConditionKind",
    "PreconditionDescriptor",
    "ContractError",
    "ConditionLookupError",
    "ParameterIndexError",
    "PreconditionViolation",
    "UnrecognizedCheck",
]
