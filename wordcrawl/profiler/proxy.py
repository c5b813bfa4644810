import functools
from typing import Callable

from wordcrawl.profiler.profiled import capability_operations, is_profiled


class ProfilingProxy:
    """Base class of the generated per-capability proxies.

    A proxy holds the delegate, the clock and the shared ProfilingState.
    Equality and hashing go straight to the delegate and are never timed.
    """

    __slots__ = ("_delegate", "_clock", "_state")

    def __init__(self, delegate, clock, state):
        self._delegate = delegate
        self._clock = clock
        self._state = state

    def __eq__(self, other):
        if isinstance(other, ProfilingProxy):
            other = other._delegate
        return self._delegate == other

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._delegate)

    def __repr__(self):
        return f"<{type(self).__name__} delegate={self._delegate!r}>"


def _forwarding_method(name: str, declared: Callable) -> Callable:
    @functools.wraps(declared)
    def method(self, *args, **kwargs):
        return getattr(self._delegate, name)(*args, **kwargs)

    return method


def _timed_method(name: str, declared: Callable) -> Callable:
    @functools.wraps(declared)
    def method(self, *args, **kwargs):
        delegate = self._delegate
        start = self._clock.now()
        try:
            return getattr(delegate, name)(*args, **kwargs)
        finally:
            self._state.record(type(delegate), name, self._clock.now() - start)

    return method


@functools.lru_cache(maxsize=None)
def proxy_class_for(capability: type) -> type:
    """Build (once per capability) a ProfilingProxy subclass exposing its operations."""
    namespace = {"__slots__": ()}
    for name, declared in capability_operations(capability).items():
        if is_profiled(declared):
            namespace[name] = _timed_method(name, declared)
        else:
            namespace[name] = _forwarding_method(name, declared)
    return type(f"Profiled{capability.__name__}", (ProfilingProxy,), namespace)
