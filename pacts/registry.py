"""
Named checks for @pre annotations and classes for class-typed @param lines.

Usage:
    registry = CheckRegistry()

    @registry.check()
    def non_zero(value) -> bool:
        return value != 0

    registry.register_type("Decimal", Decimal)
"""

from typing import Any, Callable, Dict, Optional

# Public names of the Pact mixin; never resolved as host checks
RESERVED_HOST_NAMES = frozenset({
    "call", "has_precondition", "get_conditions", "basic_check",
    "pact_settings", "pact_registry",
})


class CheckRegistry:
    """Lookup table of custom check routines and documented class names"""

    def __init__(self):
        self.checks: Dict[str, Callable[[Any], bool]] = {}
        self.types: Dict[str, type] = {}

    def register(self, name: str, func: Callable[[Any], bool]) -> None:
        self.checks[name] = func

    def register_type(self, name: str, cls: type) -> None:
        self.types[name] = cls

    def check(self, name: Optional[str] = None) -> Callable:
        """
        Register the decorated function as a custom check.

        Args:
            name: Name used in @pre lines (defaults to the function name)
        """
        def decorator(func: Callable) -> Callable:
            self.register(name or func.__name__, func)
            return func
        return decorator

    def resolve_check(self, name: str, host: Any = None) -> Optional[Callable[[Any], bool]]:
        """
        Find a custom check by name.

        Registered checks win over methods of the host object. Private
        names and the contract machinery itself are never used as checks.
        """
        func = self.checks.get(name)
        if func is None and host is not None:
            if name.startswith("_") or name in RESERVED_HOST_NAMES:
                return None
            candidate = getattr(host, name, None)
            if callable(candidate):
                func = candidate
        return func

    def resolve_type(self, name: str) -> Optional[type]:
        return self.types.get(name)


default_registry = CheckRegistry()
