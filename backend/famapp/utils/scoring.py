# backend/famapp/utils/scoring.py

from typing import List

from famapp.models.task_models import Priority, SmartTask


URGENCY_BOOST = 1000

PRIORITY_POINTS = {
    Priority.HIGH: 100,
    Priority.MEDIUM: 50,
    Priority.LOW: 10,
}


def _is_time_to_act(task: SmartTask, days_until_trip: int) -> bool:
    """The reminder window has opened: the trip is at or inside the task's threshold."""
    return task.days_before_trip is not None and days_until_trip <= task.days_before_trip


def score_task(task: SmartTask, days_until_trip: int) -> int:
    """
    Score(t) = 1000·[urgent or time to act] + PriorityPoints(t)

    PriorityPoints: high=100, medium=50, low=10.
    So any urgent task outranks every non-urgent one, and within the same
    urgency band high > medium > low.
    """
    score = 0
    if task.urgent or _is_time_to_act(task, days_until_trip):
        score += URGENCY_BOOST
    score += PRIORITY_POINTS[task.priority]
    return score


def prioritize_tasks(tasks: List[SmartTask], days_until_trip: int) -> List[SmartTask]:
    # sorted() is stable: equal scores keep insertion order
    return sorted(tasks, key=lambda t: score_task(t, days_until_trip), reverse=True)
