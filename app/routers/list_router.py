from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.todo import TodoCreate, TodoCreateInList, TodoOut
from app.schemas.todo_list import TodoListCreate, TodoListOut, TodoListUpdate
from app.services.todo_list_service import TodoListService
from app.services.todo_service import TodoService
from app.database import get_db

router = APIRouter()
service = TodoListService()
todo_service = TodoService()

@router.get("", response_model=list[TodoListOut])
async def list_lists(
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_lists(db, limit=limit, offset=offset)

@router.post("", response_model=TodoListOut, status_code=201)
async def create_list(list_in: TodoListCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_list(db, list_in)

@router.get("/{list_id}", response_model=TodoListOut)
async def get_list(list_id: int, db: AsyncSession = Depends(get_db)):
    return await service.get_list(db, list_id)

@router.patch("/{list_id}", response_model=TodoListOut)
async def rename_list(list_id: int, list_in: TodoListUpdate, db: AsyncSession = Depends(get_db)):
    return await service.rename_list(db, list_id, list_in)

@router.delete("/{list_id}", status_code=204)
async def delete_list(list_id: int, cascade: bool = False, db: AsyncSession = Depends(get_db)):
    await service.delete_list(db, list_id, cascade=cascade)
    return Response(status_code=204)

@router.get("/{list_id}/todos", response_model=list[TodoOut])
async def list_todos_of_list(
    list_id: int,
    checked: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
):
    return await service.list_todos(db, list_id, checked=checked)

@router.post("/{list_id}/todos", response_model=TodoOut, status_code=201)
async def create_todo_in_list(list_id: int, todo_in: TodoCreateInList, db: AsyncSession = Depends(get_db)):
    return await todo_service.create_todo(db, TodoCreate(list_id=list_id, **todo_in.model_dump()))
