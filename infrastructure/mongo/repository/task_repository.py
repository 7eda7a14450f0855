import logging
import re
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from core.domain.models.task import Task, TaskId, TaskStatus
from core.domain.models.task_filter import TaskFilter
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import ping

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _object_id(task_id: TaskId) -> ObjectId | None:
    if isinstance(task_id, ObjectId):
        return task_id
    if not isinstance(task_id, str) or not ObjectId.is_valid(task_id):
        return None
    return ObjectId(task_id)


def build_query(criteria: TaskFilter) -> dict[str, Any]:
    """
    Translates a TaskFilter into a MongoDB query document.

    The search text is escaped so it matches as a literal substring.
    """
    query: dict[str, Any] = {}
    if criteria.status is not None:
        query["status"] = criteria.status.value
    if criteria.text is not None:
        pattern = {"$regex": re.escape(criteria.text), "$options": "i"}
        query["$or"] = [{"title": pattern}, {"description": pattern}]
    return query


class MongoTaskRepository(TaskRepository):
    """
    TaskRepository implementation backed by a MongoDB collection (Synchronous).

    Ids are the ObjectIds generated by MongoDB, exposed as hex strings.
    Listing returns the newest tasks first.
    """

    def __init__(self, collection: Collection[Any]) -> None:
        self.collection = collection

    def check_connection(self) -> None:
        ping(self.collection.database)
        logger.info("Connected to MongoDB")

    def list(self, criteria: TaskFilter | None = None) -> list[Task]:
        """
        Lists the tasks matching `criteria`, newest first.

        Args:
            criteria: Optional status / text filter.

        Returns:
            list[Task]: The matching tasks.
        """
        query = build_query(criteria or TaskFilter())
        docs = self.collection.find(query).sort("createdAt", DESCENDING)
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def add(self, task: Task) -> Task:
        """
        Inserts a new task and returns it with its generated id.

        Args:
            task: The task to store. Its `id` is ignored.
        """
        document = TaskMongo.new_document(task, _utcnow())
        result = self.collection.insert_one(document)
        return Task(
            id=str(result.inserted_id),
            title=task.title,
            description=task.description,
            completed=task.completed,
            status=task.status,
        )

    def get(self, task_id: TaskId) -> Task | None:
        """
        Obtains a task by its id.

        Returns:
            Task | None: The task found, or None if it does not exist.
        """
        object_id = _object_id(task_id)
        if object_id is None:
            return None
        doc = self.collection.find_one({"_id": object_id})
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def update(self, task_id: TaskId, changes: dict[str, Any]) -> Task | None:
        """
        Applies a partial update in a single atomic operation.

        Returns:
            Task | None: The updated task, or None if it does not exist.
        """
        object_id = _object_id(task_id)
        if object_id is None:
            return None
        fields = {
            key: value.value if isinstance(value, TaskStatus) else value
            for key, value in changes.items()
            if key != "id"
        }
        fields["updatedAt"] = _utcnow()
        doc = self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def delete(self, task_id: TaskId) -> bool:
        """
        Deletes a task by its id.

        Returns:
            bool: True when a task was removed.
        """
        object_id = _object_id(task_id)
        if object_id is None:
            return False
        result = self.collection.delete_one({"_id": object_id})
        return result.deleted_count == 1
