import inspect
import typing
from typing import Callable, Dict

_PROFILED_ATTR = "__profiled__"

# Bases whose members are never part of a capability.
_IGNORED_BASES = (object, typing.Protocol, typing.Generic)


def profiled(func: Callable) -> Callable:
    """Mark an operation of a capability class as timed by the profiler."""
    setattr(func, _PROFILED_ATTR, True)
    return func


def is_profiled(func: Callable) -> bool:
    return bool(getattr(func, _PROFILED_ATTR, False))


def capability_operations(capability: type) -> Dict[str, Callable]:
    """Return the public operations declared on `capability` and its bases.

    Subclass declarations win over base declarations of the same name.
    """
    if not inspect.isclass(capability):
        raise TypeError(f"capability must be a class, got {capability!r}")

    operations: Dict[str, Callable] = {}
    for klass in reversed(capability.__mro__):
        if klass in _IGNORED_BASES:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or not inspect.isfunction(member):
                continue
            operations[name] = member
    return operations


def profiled_operation_names(capability: type) -> list[str]:
    return sorted(name for name, func in capability_operations(capability).items() if is_profiled(func))
