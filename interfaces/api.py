# interfaces/api.py
from fastapi import APIRouter, HTTPException, Depends, Response, status
from schemas.task import TaskCreate, TaskUpdate, TaskResponse, MessageResponse
from application.use_cases import TaskUseCases
from infrastructure.database import Database
from domain.entities import Task
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])
db = Database()
use_cases = TaskUseCases(db)

TASK_NOT_FOUND = "Task not found"
NOT_FOUND_RESPONSES = {404: {"model": MessageResponse, "description": TASK_NOT_FOUND}}

def get_use_cases() -> TaskUseCases:
    """Process-wide use cases over the shared in-memory store."""
    return use_cases

def to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        completed=task.completed
    )

@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(tasks: TaskUseCases = Depends(get_use_cases)):
    return [to_response(task) for task in tasks.get_all_tasks()]

@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, tasks: TaskUseCases = Depends(get_use_cases)):
    created_task = tasks.create_task(task.title, task.description)
    return to_response(created_task)

@router.get("/tasks/{task_id}", response_model=TaskResponse, responses=NOT_FOUND_RESPONSES)
async def get_task(task_id: str, tasks: TaskUseCases = Depends(get_use_cases)):
    task = tasks.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return to_response(task)

@router.put("/tasks/{task_id}", response_model=TaskResponse, responses=NOT_FOUND_RESPONSES)
async def update_task(task_id: str, task: TaskUpdate, tasks: TaskUseCases = Depends(get_use_cases)):
    updated_task = tasks.update_task(task_id, task.title, task.description, task.completed)
    if not updated_task:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return to_response(updated_task)

@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskResponse, responses=NOT_FOUND_RESPONSES)
async def toggle_task_completion(task_id: str, tasks: TaskUseCases = Depends(get_use_cases)):
    updated_task = tasks.toggle_task(task_id)
    if not updated_task:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    logger.info(f"Task {task_id} toggled to completed = {updated_task.completed}")
    return to_response(updated_task)

@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_task(task_id: str, tasks: TaskUseCases = Depends(get_use_cases)):
    # An unknown id is a no-op, not a 404
    tasks.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
