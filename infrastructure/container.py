import logging

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.mongo.session.client import get_db
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import init_database
from infrastructure.settings import Settings

logger = logging.getLogger(__name__)


def build_task_repository(settings: Settings) -> TaskRepository:
    """
    Selects the storage once, at startup.

    MONGODB_URI set -> MongoDB, else DATABASE_URL set -> SQL (peewee),
    else the in-memory store.
    """
    mode = settings.storage_mode

    if mode == "mongo":
        logger.info(f"Using MongoDB task store (database: {settings.mongodb_db})")
        db = get_db(settings.mongodb_uri, settings.mongodb_db)
        return MongoTaskRepository(collection=db.tasks)
    elif mode == "sql":
        logger.info("Using SQL task store (peewee)")
        init_database(settings.database_url)
        return PeeweeTaskRepository()

    logger.info("No database configured, using in-memory task store")
    return InMemoryTaskRepository()


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
