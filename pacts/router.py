"""
Route contract-checked calls through precondition evaluation.
"""

import functools
import inspect
import logging
from typing import Any, Callable, List, Optional, Sequence

from .core.config import BASIC_TYPE_CHECKS, Settings, get_settings
from .core.errors import ParameterIndexError, PreconditionViolation, UnrecognizedCheck
from .core.models import CheckKind, CheckResult, ConditionKind, PreconditionDescriptor
from .extractor import ConditionExtractor
from .registry import CheckRegistry, default_registry

logger = logging.getLogger(__name__)


def _argument(descriptor: PreconditionDescriptor, args: Sequence[Any]) -> Any:
    index = descriptor.param - 1
    if index < 0 or index >= len(args):
        raise ParameterIndexError(
            f"Precondition on parameter {descriptor.param} but only "
            f"{len(args)} argument(s) were supplied"
        )
    return args[index]


def basic_check(descriptor: PreconditionDescriptor, args: Sequence[Any]) -> bool:
    """
    Check an argument against a primitive type predicate.

    Args:
        descriptor: Basic descriptor naming the type and 1-based position
        args: Actual call arguments

    Returns:
        Whether the argument satisfies the type

    Raises:
        ParameterIndexError: If the position is outside args
        UnrecognizedCheck: If the type has no basic predicate
    """
    predicate = BASIC_TYPE_CHECKS.get(descriptor.type)
    if predicate is None:
        raise UnrecognizedCheck(f"No basic check for type '{descriptor.type}'")
    return bool(predicate(_argument(descriptor, args)))


def bind_arguments(func: Callable, args: Sequence[Any], kwargs: dict) -> List[Any]:
    """
    Flatten a call into values in parameter order.

    Keyword arguments, keyword-only parameters and defaults are placed at
    their positions and *args is expanded in place, so that descriptor
    indices line up with the signature. **kwargs takes no position.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return list(args)
    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()

    values: List[Any] = []
    for name, parameter in signature.parameters.items():
        if parameter.kind is inspect.Parameter.VAR_KEYWORD:
            continue
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            values.extend(bound.arguments[name])
        else:
            values.append(bound.arguments[name])
    return values


class ContractRouter:
    """Evaluate a method's preconditions before letting the call through"""

    def __init__(self,
                 extractor: ConditionExtractor,
                 registry: Optional[CheckRegistry] = None,
                 host: Any = None,
                 settings: Optional[Settings] = None):
        self.extractor = extractor
        self.registry = registry if registry is not None else default_registry
        self.host = host
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings if self._settings is not None else get_settings()

    def check_condition(self, descriptor: PreconditionDescriptor, args: Sequence[Any]) -> CheckResult:
        """Evaluate one descriptor against the call arguments"""
        if descriptor.check is CheckKind.BASIC:
            return CheckResult(descriptor, basic_check(descriptor, args))

        if descriptor.check is CheckKind.CLASS:
            cls = self.registry.resolve_type(descriptor.type)
            if cls is None:
                if self.settings.strict:
                    raise UnrecognizedCheck(f"No class registered for type '{descriptor.type}'")
                logger.debug("Skipping unregistered class type %s", descriptor.type)
                return CheckResult(descriptor, True, skipped=True,
                                   reason=f"class '{descriptor.type}' is not registered")
            return CheckResult(descriptor, isinstance(_argument(descriptor, args), cls))

        func = self.registry.resolve_check(descriptor.type, self.host)
        if func is None:
            raise UnrecognizedCheck(f"No check routine named '{descriptor.type}'")
        return CheckResult(descriptor, bool(func(_argument(descriptor, args))))

    def evaluate(self, method_name: str, args: Sequence[Any]) -> List[CheckResult]:
        """Evaluate every precondition of a method, in extraction order"""
        if not self.extractor.has_precondition(method_name):
            return []
        return [
            self.check_condition(descriptor, args)
            for descriptor in self.extractor.get_conditions(ConditionKind.PRE, method_name)
        ]

    def enforce(self, method_name: str, args: Sequence[Any]) -> None:
        """
        Stop a call whose preconditions do not hold.

        Raises:
            PreconditionViolation: On the first failing descriptor, when
                enforcement is enabled
        """
        if not self.extractor.has_precondition(method_name):
            return

        for descriptor in self.extractor.get_conditions(ConditionKind.PRE, method_name):
            result = self.check_condition(descriptor, args)
            if result.passed:
                continue
            value = _argument(descriptor, args)
            if self.settings.enforce:
                raise PreconditionViolation(method_name, descriptor, value)
            logger.warning("Precondition %s '%s' on argument %d of %s failed for %r",
                           descriptor.check.value, descriptor.type, descriptor.param,
                           method_name, value)

    def invoke(self, method_name: str, func: Callable, *args, **kwargs) -> Any:
        """Check preconditions of method_name, then call func"""
        self.enforce(method_name, bind_arguments(func, args, kwargs))
        return func(*args, **kwargs)


class GuardedFunction:
    """
    Checking wrapper returned by guard.

    Works as a descriptor, so on a method the instance is bound before
    positions are computed and argument 1 is the first one after self.
    """

    def __init__(self, func: Callable, router: ContractRouter, name: str):
        functools.update_wrapper(self, func)
        self.__pact_router__ = router
        self._func = func
        self._router = router
        self._name = name

    def __call__(self, *args, **kwargs):
        return self._router.invoke(self._name, self._func, *args, **kwargs)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        bound = self._func.__get__(instance, owner)

        @functools.wraps(self._func)
        def method(*args, **kwargs):
            return self._router.invoke(self._name, bound, *args, **kwargs)

        return method


def guard(func: Callable,
          descriptors: Optional[List[PreconditionDescriptor]] = None,
          registry: Optional[CheckRegistry] = None,
          settings: Optional[Settings] = None) -> Callable:
    """
    Wrap a callable so every call is checked first.

    Args:
        func: Target function, or a method inside a class body
        descriptors: Explicit preconditions; taken from func's docstring
            on first call when omitted
        registry: Registry for custom and class checks
        settings: Settings override

    Returns:
        The checking wrapper
    """
    name = getattr(func, "__name__", repr(func))
    extractor = ConditionExtractor(lambda _name: func.__doc__)
    if descriptors is not None:
        extractor.load(name, descriptors)
    router = ContractRouter(extractor, registry=registry, settings=settings)
    return GuardedFunction(func, router, name)
