import pytest

from core.domain.models.task import Task, TaskStatus
from core.domain.models.task_filter import TaskFilter


def test_from_query_ignores_unknown_status():
    assert TaskFilter.from_query(status="done").status is None
    assert TaskFilter.from_query(status="in-progress").status is TaskStatus.IN_PROGRESS


@pytest.mark.parametrize("q", [None, "", "   "])
def test_from_query_blank_text_means_no_text(q):
    criteria = TaskFilter.from_query(q=q)

    assert criteria.text is None
    assert criteria.is_empty


def test_text_matches_title_or_description_case_insensitively():
    criteria = TaskFilter.from_query(q="  Alpha ")

    assert criteria.matches(Task(title="The ALPHA task"))
    assert criteria.matches(Task(title="Other", description="mentions alpha"))
    assert not criteria.matches(Task(title="Beta", description="gamma"))


def test_status_and_text_combine_with_and():
    criteria = TaskFilter.from_query(status="completed", q="report")

    assert criteria.matches(Task(title="Report", status=TaskStatus.COMPLETED))
    assert not criteria.matches(Task(title="Report", status=TaskStatus.PENDING))
    assert not criteria.matches(Task(title="Invoice", status=TaskStatus.COMPLETED))
