"""Search and filter resolution for the task console.

The console filters twice: the service narrows by status and substring,
then `narrow` applies a stricter pass locally (exact title match) and has the
final word on what is displayed.
"""
from dataclasses import dataclass, field
from typing import Any

STATUSES = ("pending", "in-progress", "completed")

TaskDict = dict[str, Any]


@dataclass(slots=True, frozen=True)
class SearchPlan:
    effective_status: str
    query_is_status: bool
    params: dict[str, str] = field(default_factory=dict)


def resolve_search(query: str, status_filter: str) -> SearchPlan:
    """
    Works out the effective status and the query parameters for a fetch.

    A query that is exactly a status literal (ignoring case and surrounding
    blanks) selects that status; an explicit `status_filter` always wins.
    The raw query is only sent as `q` when it was not taken as a status.
    """
    trimmed = query.strip().lower()
    query_is_status = trimmed in STATUSES
    effective_status = status_filter or (trimmed if query_is_status else "")

    params: dict[str, str] = {}
    if effective_status:
        params["status"] = effective_status
    if not query_is_status and query:
        params["q"] = query
    return SearchPlan(effective_status, query_is_status, params)


def derived_status(task: TaskDict) -> str:
    status = task.get("status")
    if status:
        return status
    return "completed" if task.get("completed") else "pending"


def task_id(task: TaskDict) -> str:
    value = task.get("_id") or task.get("id")
    return "" if value is None else str(value)


def narrow(tasks: list[TaskDict], query: str, status_filter: str) -> list[TaskDict]:
    trimmed = query.strip().lower()
    effective_status = resolve_search(query, status_filter).effective_status

    if effective_status:
        return [t for t in tasks if derived_status(t) == effective_status]
    if trimmed:
        # exact title match only when the query is not a status
        return [t for t in tasks if (t.get("title") or "").lower() == trimmed]
    return list(tasks)
