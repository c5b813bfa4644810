import logging
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, Deque, Iterable, List, Optional

logger = logging.getLogger(__name__)


class _ForkJoinTask:
    """A job plus the bookkeeping that joins it with the children it forks.

    `pending` counts the job's own body and every child not yet complete.
    The task completes, and resolves its future, when it drops to zero.
    """

    __slots__ = ("fn", "parent", "future", "result", "error", "pending", "lock")

    def __init__(self, fn: Callable[[], Any], parent: Optional["_ForkJoinTask"] = None):
        self.fn = fn
        self.parent = parent
        self.future: Future = Future()
        self.result: Any = None
        self.error: Optional[BaseException] = None
        self.pending = 1
        self.lock = threading.Lock()

    def add_child(self) -> None:
        with self.lock:
            self.pending += 1


class ForkJoinPool:
    """Fixed set of worker threads for recursive fork/join work.

    A job running on the pool calls `fork` for each child. The job counts as
    done only once its body returned and every forked child (recursively) is
    done, so a caller of `invoke_all` is released when the whole tree has
    finished. No worker ever blocks on its children, so the depth of the
    tree is bounded neither by the number of workers nor by the stack.
    """

    def __init__(self, parallelism: int, *, name: str = "crawl-worker"):
        if parallelism < 1:
            raise ValueError("parallelism must be >= 1")
        self.parallelism = int(parallelism)
        self._jobs: Deque[_ForkJoinTask] = deque()
        self._cond = threading.Condition()
        self._shutdown = False
        self._local = threading.local()
        self._workers = [
            threading.Thread(target=self._work_loop, name=f"{name}-{i}", daemon=True)
            for i in range(self.parallelism)
        ]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> "ForkJoinPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _current(self) -> Optional[_ForkJoinTask]:
        return getattr(self._local, "task", None)

    def _push(self, task: _ForkJoinTask) -> None:
        with self._cond:
            self._jobs.append(task)
            self._cond.notify()

    def _run(self, task: _ForkJoinTask) -> None:
        self._local.task = task
        error = None
        try:
            task.result = task.fn()
        except BaseException as e:
            error = e
        finally:
            self._local.task = None
        self._complete(task, error)

    def _complete(self, task: Optional[_ForkJoinTask], error: Optional[BaseException]) -> None:
        # walk up the tree iteratively; each finished task releases its parent once
        while task is not None:
            with task.lock:
                if error is not None and task.error is None:
                    task.error = error
                task.pending -= 1
                if task.pending:
                    return
                error = task.error
            if error is not None:
                task.future.set_exception(error)
            else:
                task.future.set_result(task.result)
            task = task.parent

    def _work_loop(self) -> None:
        while True:
            with self._cond:
                while not self._jobs and not self._shutdown:
                    self._cond.wait()
                if not self._jobs:
                    return
                task = self._jobs.popleft()
            self._run(task)

    def fork(self, fn: Callable[[], Any]) -> None:
        """Schedule `fn` as a child of the job currently running on this thread.

        Must be called from a job of this pool. The first exception raised in
        a subtree is reported by the `invoke_all` call that started it.
        """
        parent = self._current()
        if parent is None:
            raise RuntimeError("fork() must be called from a job running on this pool")
        parent.add_child()
        self._push(_ForkJoinTask(fn, parent))

    def invoke_all(self, fns: Iterable[Callable[[], Any]]) -> List[Any]:
        """Run every callable on the pool and wait until their trees finished.

        Returns their results in order. If any job or forked child raised, the
        first exception (in submission order of the top-level jobs) is
        re-raised once everything is done.
        """
        if self._current() is not None:
            raise RuntimeError("invoke_all() cannot wait from inside a pool job; use fork()")
        tasks = [_ForkJoinTask(fn) for fn in fns]
        with self._cond:
            if self._shutdown:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            self._jobs.extend(tasks)
            self._cond.notify_all()
        futures = [task.future for task in tasks]
        for future in futures:
            future.exception()
        return [future.result() for future in futures]

    def invoke(self, fn: Callable[[], Any]) -> Any:
        return self.invoke_all([fn])[0]

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting jobs. Workers finish the queued jobs, then exit."""
        with self._cond:
            self._shutdown = True
            self._cond.notify_all()
        if wait:
            for worker in self._workers:
                worker.join()
        logger.debug("Pool of %s workers shut down", self.parallelism)
