from core.domain.models.task import TaskId


def parse_sequential_id(task_id: TaskId) -> int | None:
    """
    Converts an identifier coming from a URL into a sequential integer id.

    Returns None when the value cannot be a sequential id, so callers can
    report it as not found.
    """
    if isinstance(task_id, bool):
        return None
    if isinstance(task_id, int):
        return task_id
    text = str(task_id).strip()
    if not text.isdigit():
        return None
    return int(text)
