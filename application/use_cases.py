from typing import List, Optional
from domain.entities import Task
from infrastructure.database import Database
import logging

logger = logging.getLogger(__name__)

class TaskUseCases:
    def __init__(self, db: Database):
        self.db = db

    def create_task(self, title: str, description: str = "") -> Task:
        task = Task(id=self.db.next_id(), title=title, description=description)
        created_task = self.db.create_task(task)
        logger.info(f"Created task {created_task.id}")
        return created_task

    def get_task(self, task_id: str) -> Optional[Task]:
        return self.db.get_task_by_id(task_id)

    def get_all_tasks(self) -> List[Task]:
        tasks = self.db.get_all_tasks()
        logger.debug(f"Listing {len(tasks)} tasks")
        return tasks

    def update_task(self, task_id: str, title: Optional[str] = None, description: Optional[str] = None, completed: Optional[bool] = None) -> Optional[Task]:
        task = self.get_task(task_id)
        if not task:
            logger.warning(f"Update requested for unknown task {task_id}")
            return None
        updated_task = Task(
            id=task.id,
            title=title if title is not None else task.title,
            description=description if description is not None else task.description,
            completed=completed if completed is not None else task.completed,
        )
        logger.info(f"Updated task {task_id}")
        return self.db.update_task(task_id, updated_task)

    def toggle_task(self, task_id: str) -> Optional[Task]:
        task = self.get_task(task_id)
        if not task:
            logger.warning(f"Toggle requested for unknown task {task_id}")
            return None
        logger.info(f"Toggling task {task_id}: current completed = {task.completed}")
        return self.update_task(task_id, completed=not task.completed)

    def delete_task(self, task_id: str) -> int:
        removed = self.db.delete_task(task_id)
        if removed:
            logger.info(f"Deleted task {task_id}")
        else:
            # Still reported to the client as a success
            logger.warning(f"Delete requested for unknown task {task_id}")
        return removed
