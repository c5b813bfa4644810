from datetime import timedelta
from typing import Dict, TextIO, Tuple

from wordcrawl.domain.striped_counter import StripedCounter
from wordcrawl.utils.datetime_utils import format_duration

Operation = Tuple[type, str]


def format_operation(implementation: type, operation: str) -> str:
    return f"{implementation.__module__}.{implementation.__qualname__}#{operation}"


class ProfilingState:
    """Cumulative elapsed time per (implementation type, operation).

    Shared by every proxy created by one Profiler; `record` may be called
    from any thread. Entries are keyed by the type object itself, so two
    distinct types that render to the same name stay separate.
    """

    def __init__(self, stripes: int = 16):
        self._totals: StripedCounter[timedelta] = StripedCounter(timedelta(0), stripes=stripes)

    def record(self, implementation: type, operation: str, elapsed: timedelta) -> None:
        # a wall clock stepping backwards yields a negative reading; count it as zero
        self._totals.add((implementation, operation), max(elapsed, timedelta(0)))

    def get(self, implementation: type, operation: str) -> timedelta:
        return self._totals.get((implementation, operation))

    def totals(self) -> Dict[Operation, timedelta]:
        return self._totals.snapshot()

    def write(self, sink: TextIO) -> None:
        """Write one line per operation, sorted by the rendered operation name."""
        lines = sorted(
            (format_operation(implementation, operation), total)
            for (implementation, operation), total in self.totals().items()
        )
        for name, total in lines:
            sink.write(f"{name} took {format_duration(total)}\n")
