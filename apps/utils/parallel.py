"""Run independent reads concurrently and join them."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable


def fetch_parallel(**tasks: Callable[[], Any]) -> dict[str, Any]:
    """Call every task on its own worker thread and return results by name.

    All tasks are awaited before returning. If any task raised, the exception
    of the first failing task (in keyword order) is re-raised here.
    """
    if not tasks:
        return {}

    with ThreadPoolExecutor(max_workers=len(tasks)) as executor:
        futures = {name: executor.submit(task) for name, task in tasks.items()}

    # Leaving the executor block joins every worker.
    return {name: future.result() for name, future in futures.items()}
