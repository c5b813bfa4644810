import logging
from typing import Optional, TextIO, TypeVar

from wordcrawl.exceptions import NoProfiledOperationsError
from wordcrawl.profiler.profiled import profiled_operation_names
from wordcrawl.profiler.profiling_state import ProfilingState
from wordcrawl.profiler.proxy import proxy_class_for
from wordcrawl.utils.clock import Clock
from wordcrawl.utils.datetime_utils import format_rfc1123

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Profiler:
    """Times @profiled operations of wrapped objects.

    All proxies created by one Profiler share its ProfilingState, so the
    report covers every wrapped delegate.
    """

    def __init__(self, clock: Clock, state: Optional[ProfilingState] = None):
        if clock is None:
            raise ValueError("clock is required")
        self._clock = clock
        self._state = state if state is not None else ProfilingState()
        self._start_time = clock.now()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, capability: type[T], delegate: T) -> T:
        """Return a proxy of `delegate` exposing the operations of `capability`.

        Raises NoProfiledOperationsError if `capability` has no @profiled
        operation.
        """
        if delegate is None:
            raise ValueError("delegate is required")
        timed = profiled_operation_names(capability)
        if not timed:
            raise NoProfiledOperationsError(capability)
        logger.debug("Profiling %s operations %s of %s", capability.__qualname__, timed, type(delegate).__qualname__)
        return proxy_class_for(capability)(delegate, self._clock, self._state)

    def write_data(self, sink: TextIO) -> None:
        """Write the report of the current cumulative totals to `sink`."""
        sink.write(f"Run at {format_rfc1123(self._start_time)}\n")
        self._state.write(sink)
        sink.write("\n")
        sink.flush()

    def write_data_to_path(self, path: str) -> None:
        """Append the report to the file at `path`, creating it if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_data(f)
