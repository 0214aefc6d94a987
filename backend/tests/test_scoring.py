# backend/tests/test_scoring.py

from famapp.models.task_models import Priority
from famapp.rules.caps import make_task
from famapp.utils.scoring import prioritize_tasks, score_task


def _task(task_id, priority=Priority.MEDIUM, days_before_trip=None, urgent=False):
    return make_task(
        task_id, task_id, "subtitle",
        priority=priority, days_before_trip=days_before_trip, urgent=urgent,
        reasoning="test", source="test",
    )


def test_priority_points():
    assert score_task(_task("h", Priority.HIGH), 90) == 100
    assert score_task(_task("m", Priority.MEDIUM), 90) == 50
    assert score_task(_task("l", Priority.LOW), 90) == 10


def test_urgent_flag_or_open_window_boosts():
    assert score_task(_task("u", Priority.LOW, urgent=True), 90) == 1010
    assert score_task(_task("w", Priority.MEDIUM, days_before_trip=30), 30) == 1050
    assert score_task(_task("w", Priority.MEDIUM, days_before_trip=30), 31) == 50


def test_zero_days_opens_every_window():
    for threshold in (0, 3, 90):
        assert score_task(_task("t", Priority.LOW, days_before_trip=threshold), 0) == 1010
    assert score_task(_task("none", Priority.LOW), 0) == 10


def test_urgent_low_outranks_high():
    ranked = prioritize_tasks([_task("high", Priority.HIGH), _task("urgent-low", Priority.LOW, urgent=True)], 90)
    assert [t.id for t in ranked] == ["urgent-low", "high"]


def test_ties_keep_insertion_order():
    tasks = [_task(f"m{i}") for i in range(5)] + [_task("h", Priority.HIGH)]
    ranked = prioritize_tasks(tasks, 90)
    assert [t.id for t in ranked] == ["h", "m0", "m1", "m2", "m3", "m4"]
