"""State and actions of the task console.

The controller keeps the last fetched snapshot of the collection plus the
uncommitted form and search-bar state. Every mutation is followed by a full
re-fetch; nothing is updated optimistically.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable

import httpx

from console.api_client import TaskApiClient
from console.debounce import Debouncer, TimerFactory
from console.search import TaskDict, narrow, resolve_search, task_id

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load tasks"
CREATE_ERROR = "Failed to create task"

SEARCH_DEBOUNCE_SECONDS = 0.3


@dataclass(slots=True)
class TaskForm:
    title: str = ""
    description: str = ""
    status: str = "pending"

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.status = "pending"


class TaskConsole:
    def __init__(
        self,
        client: TaskApiClient,
        debounce_delay: float = SEARCH_DEBOUNCE_SECONDS,
        timer_factory: TimerFactory | None = None,
        on_auto_search: Callable[[], None] | None = None,
    ) -> None:
        self.client = client
        # Called on the timer thread once a debounced search has landed.
        self.on_auto_search = on_auto_search
        self.tasks: list[TaskDict] = []
        self.loading = False
        self.error: str | None = None

        self.form = TaskForm()
        self.query = ""
        self.status_filter = ""

        self._debouncer = Debouncer(
            debounce_delay, self._auto_search, timer_factory or threading.Timer
        )

    # -------------------- derived view state --------------------
    @property
    def search_active(self) -> bool:
        return bool(self.query.strip() or self.status_filter)

    @property
    def visible_tasks(self) -> list[TaskDict]:
        return narrow(self.tasks, self.query, self.status_filter)

    @property
    def show_no_results(self) -> bool:
        return self.search_active and not self.visible_tasks and not self.loading

    # -------------------- fetching --------------------
    def start(self) -> None:
        """Initial load: the whole collection, no filters."""
        self.fetch_tasks()

    def fetch_tasks(self) -> None:
        self.loading = True
        self.error = None
        plan = resolve_search(self.query, self.status_filter)
        try:
            self.tasks = self.client.list_tasks(plan.params)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Fetching tasks failed: {e}")
            self.error = LOAD_ERROR
        finally:
            self.loading = False

    def search(self) -> None:
        """Explicit search; does nothing while both query and filter are empty."""
        if self.search_active:
            self.fetch_tasks()

    def set_query(self, text: str) -> None:
        self.query = text
        self._debouncer.trigger()

    def set_status_filter(self, value: str) -> None:
        self.status_filter = value
        if value or self.query.strip():
            self.fetch_tasks()

    def _auto_search(self) -> None:
        if not self.search_active:
            return
        self.fetch_tasks()
        if self.on_auto_search is not None:
            self.on_auto_search()

    # -------------------- mutations --------------------
    def create(self) -> TaskDict | None:
        if not self.form.title.strip():
            return None

        self.loading = True
        self.error = None
        creating_status = self.form.status
        payload = {
            "title": self.form.title,
            "description": self.form.description,
            "status": creating_status,
        }
        try:
            created = self.client.create_task(payload)
        except httpx.HTTPError as e:
            logger.warning(f"Creating task failed: {e}")
            self.error = CREATE_ERROR
            self.loading = False
            return None

        self.form.reset()
        # Focus the list on the created status and clear the keyword so the new task shows up.
        self.status_filter = creating_status
        self.query = ""
        self._debouncer.cancel()
        self.fetch_tasks()
        return created

    def toggle(self, task: TaskDict) -> None:
        ident = task_id(task)
        if not ident:
            return
        next_completed = not task.get("completed")
        next_status = "completed" if next_completed else "pending"
        try:
            self.client.update_task(ident, {"completed": next_completed, "status": next_status})
        except httpx.HTTPError as e:
            logger.warning(f"Updating task {ident} failed: {e}")
        self.fetch_tasks()

    def delete(self, task: TaskDict) -> None:
        ident = task_id(task)
        if not ident:
            return
        try:
            self.client.delete_task(ident)
        except httpx.HTTPError as e:
            logger.warning(f"Deleting task {ident} failed: {e}")
        self.fetch_tasks()

    def close(self) -> None:
        self._debouncer.cancel()
