from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.todo import TodoCreate, TodoOut, TodoUpdate
from app.services.todo_service import TodoService
from app.database import get_db

router = APIRouter()
service = TodoService()

@router.post("", response_model=TodoOut, status_code=201)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in)

@router.get("", response_model=list[TodoOut])
async def list_todos(
    list_id: Optional[int] = None,
    checked: Optional[bool] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_todos(db, list_id=list_id, checked=checked, limit=limit, offset=offset)

@router.get("/{todo_id}", response_model=TodoOut)
async def get_todo(todo_id: int, db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, todo_id)

@router.patch("/{todo_id}", response_model=TodoOut)
async def update_todo(todo_id: int, todo_in: TodoUpdate, db: AsyncSession = Depends(get_db)):
    return await service.update_todo(db, todo_id, todo_in)

@router.delete("/{todo_id}", status_code=204)
async def delete_todo(todo_id: int, db: AsyncSession = Depends(get_db)):
    await service.delete_todo(db, todo_id)
    return Response(status_code=204)
