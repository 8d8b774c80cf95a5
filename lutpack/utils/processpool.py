"""A custom ProcessPoolExecutor that uses dill for serialization."""

import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from multiprocessing.reduction import ForkingPickler

import dill


def _init_worker() -> None:
    """Initialize worker process to use dill for pickling."""
    ForkingPickler.dumps = dill.dumps
    ForkingPickler.loads = dill.loads


class DillProcessPoolExecutor(ProcessPoolExecutor):
    """ProcessPoolExecutor that uses dill for serialization.

    The driver fans out one design per task. Results carry the extracted
    instances back to the parent, so both sides are patched to use dill.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        ForkingPickler.dumps = dill.dumps
        ForkingPickler.loads = dill.loads
        super().__init__(
            max_workers=max_workers,
            mp_context=multiprocessing.get_context("spawn"),
            initializer=_init_worker,
        )
