"""
Attach docstring contracts to classes and functions.

Usage:
    @pact
    class Calculator:
        def add(self, a, b):
            '''
            @param int a
            @param int b
            '''
            return a + b

        def divide(self, a, b):
            '''
            @param float a
            @param float b
            @pre non_zero 2
            '''
            return a / b

        def non_zero(self, value):
            return value != 0

    Calculator().add(1, "2")   # raises PreconditionViolation
"""

import functools
import inspect
import threading
import weakref
from typing import Any, Callable, List, Optional

from .core.config import Settings
from .core.models import PreconditionDescriptor
from .extractor import ConditionExtractor
from .registry import CheckRegistry
from .router import ContractRouter, basic_check, guard

_STATE_LOCK = threading.Lock()
_ROUTER_ATTR = "_pact_router"
_SLOTS_STATE: "weakref.WeakKeyDictionary" = weakref.WeakKeyDictionary()


class Pact:
    """
    Mixin providing contract detection and checked calls on a class.

    Host classes only need to implement the custom check methods named in
    their @pre lines (or register them in pact_registry).
    """

    __slots__ = ()

    pact_settings: Optional[Settings] = None
    pact_registry: Optional[CheckRegistry] = None

    def _pact_doc(self, method_name: str) -> Optional[str]:
        return getattr(type(self), method_name).__doc__

    def _pact(self) -> ContractRouter:
        state = getattr(self, "__dict__", None)
        if state is None:
            # __slots__ hosts need a __weakref__ slot
            with _STATE_LOCK:
                state = _SLOTS_STATE.setdefault(self, {})
        router = state.get(_ROUTER_ATTR)
        if router is None:
            with _STATE_LOCK:
                router = state.get(_ROUTER_ATTR)
                if router is None:
                    router = ContractRouter(
                        ConditionExtractor(self._pact_doc),
                        registry=self.pact_registry,
                        host=self,
                        settings=self.pact_settings
                    )
                    state[_ROUTER_ATTR] = router
        return router

    def has_precondition(self, method_name: str) -> bool:
        """Check whether a method documents any preconditions"""
        return self._pact().extractor.has_precondition(method_name)

    def get_conditions(self, kind, method_name: str) -> List[PreconditionDescriptor]:
        """Return previously extracted conditions ("pre" only)"""
        return self._pact().extractor.get_conditions(kind, method_name)

    def basic_check(self, descriptor: PreconditionDescriptor, args) -> bool:
        return basic_check(descriptor, args)

    def call(self, method_name: str, *args, **kwargs) -> Any:
        """
        Call a method through the contract checks.

        Args:
            method_name: Name of the method to call
            *args, **kwargs: Arguments for the method

        Raises:
            AttributeError: If the class has no such method
            PreconditionViolation: If a precondition fails
        """
        method = getattr(self, method_name)
        original = getattr(method, "__pact_original__", None)
        if original is not None:
            method = original.__get__(self, type(self))
        return self._pact().invoke(method_name, method, *args, **kwargs)


def _checked_method(name: str, func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        return self._pact().invoke(name, func.__get__(self, type(self)), *args, **kwargs)

    wrapper.__pact_original__ = func
    return wrapper


def pact(cls: type) -> type:
    """
    Class decorator routing every public method through its contract.

    Classes that do not inherit from Pact get its methods copied in, so the
    class keeps its identity.
    """
    wrapped = [name for name, value in vars(cls).items()
               if not name.startswith("_") and inspect.isfunction(value)
               and name not in vars(Pact) and not hasattr(value, "__pact_original__")]

    if not issubclass(cls, Pact):
        for name, value in vars(Pact).items():
            if name.startswith("__") or hasattr(cls, name):
                continue
            setattr(cls, name, value)

    for name in wrapped:
        setattr(cls, name, _checked_method(name, vars(cls)[name]))
    return cls


def contract(func: Optional[Callable] = None, *,
             descriptors: Optional[List[PreconditionDescriptor]] = None,
             registry: Optional[CheckRegistry] = None,
             settings: Optional[Settings] = None) -> Callable:
    """
    Enforce the docstring preconditions of a function or method.

    Usable bare (@contract) or with options (@contract(registry=...)).
    """
    def decorator(target: Callable) -> Callable:
        return guard(target, descriptors=descriptors, registry=registry, settings=settings)

    if func is not None:
        return decorator(func)
    return decorator
