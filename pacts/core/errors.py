"""
Contract error taxonomy
"""

from typing import Any, Optional

from .models import PreconditionDescriptor


class ContractError(Exception):
    """Base class for all contract errors"""


class ConditionLookupError(ContractError, LookupError):
    """Conditions were requested for a method/kind that was never populated"""


class ParameterIndexError(ContractError, IndexError):
    """A descriptor points past the arguments supplied at call time"""


class UnrecognizedCheck(ContractError):
    """No check routine is known for a descriptor"""


class PreconditionViolation(ContractError):
    """A precondition evaluated to false"""

    def __init__(self, method: str, descriptor: PreconditionDescriptor,
                 value: Any = None, reason: Optional[str] = None):
        self.method = method
        self.descriptor = descriptor
        self.value = value
        message = (
            f"Precondition failed for {method}(): "
            f"argument {descriptor.param} must satisfy "
            f"{descriptor.check.value} check '{descriptor.type}', got {value!r}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
