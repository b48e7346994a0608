"""
Data models for precondition descriptors and check results
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List


class CheckKind(str, Enum):
    """How a precondition is evaluated"""
    BASIC = "basic"
    CLASS = "class"
    CUSTOM = "custom"


class ConditionKind(str, Enum):
    """Category of condition"""
    PRE = "pre"
    POST = "post"


@dataclass(frozen=True)
class PreconditionDescriptor:
    """One constraint on one parameter of one method"""
    check: CheckKind
    type: str  # declared type name, or custom check name
    param: int  # 1-based argument position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check": self.check.value,
            "type": self.type,
            "param": self.param
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PreconditionDescriptor":
        return cls(
            check=CheckKind(data["check"]),
            type=str(data["type"]),
            param=int(data["param"])
        )


@dataclass
class CheckResult:
    """Outcome of evaluating a single descriptor"""
    descriptor: PreconditionDescriptor
    passed: bool
    skipped: bool = False
    reason: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "descriptor": self.descriptor.to_dict(),
            "passed": self.passed,
            "skipped": self.skipped,
            "reason": self.reason
        }


MethodConditionTable = Dict[str, List[PreconditionDescriptor]]
