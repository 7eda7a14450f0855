import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    DeleteResponse,
    ErrorResponse,
    TaskCreateRequest,
    TaskUpdateRequest,
)
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksCommand, ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_task(
    body: TaskCreateRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Task:
    """
    Creates a new task.

    - **title**: Title of the task (required, non-empty).
    - **description**: Optional description (defaults to "").
    - **completed**: Optional completion flag (defaults to false).
    - **status**: pending | in-progress | completed (defaults to pending).
    """
    try:
        return use_case.execute(body.to_command())
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to create task")
        raise HTTPException(status_code=500, detail="Failed to create task")


@router.get(
    "",
    response_model=list[Task],
    summary="List, filter and search tasks",
    responses={500: {"model": ErrorResponse}},
)
def list_tasks(
    status_filter: str | None = Query(default=None, alias="status"),
    q: str | None = None,
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[Task]:
    """
    Lists tasks, optionally narrowed.

    - **status**: only tasks with this status. Unknown values are ignored.
    - **q**: case-insensitive text searched in title and description.
    """
    try:
        return use_case.execute(ListTasksCommand(status=status_filter, q=q))
    except Exception:
        logger.exception("Failed to fetch tasks")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Task:
    try:
        return use_case.execute(task_id)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    except Exception:
        logger.exception(f"Failed to fetch task {task_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch task")


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def update_task(
    task_id: str,
    body: TaskUpdateRequest | None = None,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Task:
    """
    Partially updates a task. Only the fields present in the body change.
    A missing body is an empty update and returns the task unchanged.

    - **task_id**: Id of the task to modify.
    """
    try:
        if body is None:
            body = TaskUpdateRequest()
        return use_case.execute(task_id, body.to_command())
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    except Exception:
        logger.exception(f"Failed to update task {task_id}")
        raise HTTPException(status_code=500, detail="Failed to update task")


@router.delete(
    "/{task_id}",
    response_model=DeleteResponse,
    summary="Delete a task",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> DeleteResponse:
    """
    Deletes a task.

    - **task_id**: Id of the task to delete.
    """
    try:
        use_case.execute(DeleteTaskCommand(id=task_id))
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    except Exception:
        logger.exception(f"Failed to delete task {task_id}")
        raise HTTPException(status_code=500, detail="Failed to delete task")
    return DeleteResponse(success=True)
