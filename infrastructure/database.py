import time
from typing import Callable, List, Optional
from domain.entities import Task
import logging

logger = logging.getLogger(__name__)

class Database:
    """In-memory task store. Tasks live in a plain list, in insertion order,
    and are gone when the process exits."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.tasks: List[Task] = []
        self._last_id = 0

    def next_id(self) -> str:
        # Milliseconds since the epoch, bumped when two tasks share a millisecond
        candidate = int(self.clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def create_task(self, task: Task) -> Task:
        self.tasks.append(task)
        return task

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_all_tasks(self) -> List[Task]:
        return list(self.tasks)

    def update_task(self, task_id: str, updated_task: Task) -> Optional[Task]:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                self.tasks[index] = updated_task
                return updated_task
        return None

    def delete_task(self, task_id: str) -> int:
        """Drops every task with the given id and returns how many went."""
        before = len(self.tasks)
        self.tasks = [task for task in self.tasks if task.id != task_id]
        removed = before - len(self.tasks)
        logger.debug(f"Removed {removed} task(s) with id {task_id}")
        return removed
