from drillbook.task_assign import max_task_assign


def test_all_tasks_assigned_with_pill():
    tasks = [3, 2, 1]
    assert max_task_assign(tasks, [0, 3, 3], 1, 1) == len(tasks)


def test_single_pill_limits():
    assert max_task_assign([5, 4], [0, 0, 0], 1, 5) == 1


def test_pills_for_weak_workers():
    assert max_task_assign([10, 15, 30], [0, 10, 10, 10, 10], 3, 10) == 2


def test_strong_workers_do_everything_possible():
    tasks = [1, 2, 3, 4]
    workers = [100, 100, 100]
    assert max_task_assign(tasks, workers, 0, 0) == min(len(tasks), len(workers))


def test_weak_workers_without_pills():
    assert max_task_assign([5, 6, 7], [1, 2, 3], 0, 100) == 0


def test_empty_inputs():
    assert max_task_assign([], [1, 2], 1, 1) == 0
    assert max_task_assign([1, 2], [], 1, 1) == 0


def test_more_pills_never_hurts():
    tasks = [4, 8, 12, 16, 20]
    workers = [3, 7, 11, 15]
    results = [max_task_assign(tasks, workers, pills, 5) for pills in range(5)]
    assert results == sorted(results)
    assert all(r <= min(len(tasks), len(workers)) for r in results)


def test_order_of_input_irrelevant():
    tasks = [9, 1, 5, 3]
    workers = [4, 8, 2]
    assert max_task_assign(tasks, workers, 1, 3) == max_task_assign(
        sorted(tasks), sorted(workers, reverse=True), 1, 3
    )