"""Maximum number of tasks that workers can complete, with strength pills."""

from __future__ import annotations

from collections.abc import Sequence

from sortedcontainers import SortedList


def max_task_assign(tasks: Sequence[int], workers: Sequence[int], pills: int, strength: int) -> int:
    """Return how many tasks can be completed, one task per worker and one pill per worker."""
    tasks = sorted(tasks)
    workers = sorted(workers)

    def feasible(count: int) -> bool:
        pending = SortedList(tasks[:count])
        remaining_pills = pills
        for worker in workers[len(workers) - count:]:
            position = pending.bisect_right(worker)
            if position == 0:
                if remaining_pills == 0:
                    return False
                remaining_pills -= 1
                position = pending.bisect_right(worker + strength)
                if position == 0:
                    return False
            del pending[position - 1]
        return True

    low, high = 0, min(len(tasks), len(workers))
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            low = mid + 1
        else:
            high = mid - 1
    return high