from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from core.domain.models.task import Task, TaskStatus
from core.domain.models.task_filter import TaskFilter
from infrastructure.mongo.repository.task_repository import MongoTaskRepository, build_query


@pytest.fixture
def mock_mongo_collection():
    collection = MagicMock()
    return collection


@pytest.fixture
def mongo_repository(mock_mongo_collection):
    return MongoTaskRepository(collection=mock_mongo_collection)


def _doc(title="Found Task", status="pending", **extra):
    doc = {
        "_id": ObjectId(),
        "title": title,
        "description": "Found Description",
        "completed": False,
        "status": status,
        "createdAt": datetime.now(timezone.utc),
        "__v": 0,
    }
    doc.update(extra)
    return doc


def test_add_task(mongo_repository, mock_mongo_collection):
    inserted_id = ObjectId()
    mock_mongo_collection.insert_one.return_value.inserted_id = inserted_id

    task = mongo_repository.add(Task(title="Test Task", status=TaskStatus.IN_PROGRESS))

    mock_mongo_collection.insert_one.assert_called_once()
    document = mock_mongo_collection.insert_one.call_args.args[0]
    assert "_id" not in document
    assert document["status"] == "in-progress"
    assert document["createdAt"] == document["updatedAt"]
    assert task.id == str(inserted_id)
    assert task.status is TaskStatus.IN_PROGRESS


def test_get_task_found(mongo_repository, mock_mongo_collection):
    doc = _doc()
    mock_mongo_collection.find_one.return_value = doc

    result = mongo_repository.get(str(doc["_id"]))

    mock_mongo_collection.find_one.assert_called_once_with({"_id": doc["_id"]})
    assert result is not None
    assert result.id == str(doc["_id"])
    assert result.title == "Found Task"


def test_get_task_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    assert mongo_repository.get(str(ObjectId())) is None


def test_get_with_malformed_id_does_not_query(mongo_repository, mock_mongo_collection):
    assert mongo_repository.get("not-an-object-id") is None
    mock_mongo_collection.find_one.assert_not_called()


def test_list_tasks_newest_first(mongo_repository, mock_mongo_collection):
    docs = [_doc(title="Task 2"), _doc(title="Task 1", status="completed")]
    mock_mongo_collection.find.return_value.sort.return_value = docs

    results = mongo_repository.list()

    mock_mongo_collection.find.assert_called_once_with({})
    mock_mongo_collection.find.return_value.sort.assert_called_once_with("createdAt", DESCENDING)
    assert [t.title for t in results] == ["Task 2", "Task 1"]
    assert results[1].status is TaskStatus.COMPLETED


def test_build_query_with_status_and_text():
    query = build_query(TaskFilter.from_query(status="pending", q=" a.b "))

    assert query["status"] == "pending"
    pattern = {"$regex": r"a\.b", "$options": "i"}
    assert query["$or"] == [{"title": pattern}, {"description": pattern}]


def test_build_query_without_criteria():
    assert build_query(TaskFilter()) == {}


def test_update_task(mongo_repository, mock_mongo_collection):
    doc = _doc(completed=True, status="completed")
    mock_mongo_collection.find_one_and_update.return_value = doc

    result = mongo_repository.update(
        str(doc["_id"]), {"completed": True, "status": TaskStatus.COMPLETED}
    )

    args, kwargs = mock_mongo_collection.find_one_and_update.call_args
    assert args[0] == {"_id": doc["_id"]}
    fields = args[1]["$set"]
    assert fields["completed"] is True
    assert fields["status"] == "completed"
    assert "updatedAt" in fields
    assert kwargs["return_document"] is ReturnDocument.AFTER
    assert result.completed is True


def test_update_task_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_update.return_value = None

    assert mongo_repository.update(str(ObjectId()), {"title": "x"}) is None


def test_delete_task(mongo_repository, mock_mongo_collection):
    task_id = ObjectId()
    mock_mongo_collection.delete_one.return_value.deleted_count = 1

    assert mongo_repository.delete(str(task_id)) is True
    mock_mongo_collection.delete_one.assert_called_once_with({"_id": task_id})


def test_delete_task_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.delete_one.return_value.deleted_count = 0

    assert mongo_repository.delete(str(ObjectId())) is False
    assert mongo_repository.delete("42") is False


def test_check_connection_pings_server(mongo_repository, mock_mongo_collection):
    mongo_repository.check_connection()

    mock_mongo_collection.database.client.admin.command.assert_called_once_with("ping")
