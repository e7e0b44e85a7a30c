from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.todo import Todo
from app.repositories.base import BaseRepository

class TodoRepository(BaseRepository[Todo]):
    def __init__(self):
        super().__init__(Todo)

    async def list_todos(
        self,
        db: AsyncSession,
        *,
        list_id: int | None = None,
        checked: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Todo]:
        where = {}
        if list_id is not None:
            where["list_id"] = list_id
        if checked is not None:
            where["checked"] = checked
        return await self.list(db, where=where, order_by=(Todo.id,), limit=limit, offset=offset)

    async def list_for_list(self, db: AsyncSession, list_id: int, checked: bool | None = None) -> list[Todo]:
        return await self.list_todos(db, list_id=list_id, checked=checked)

    async def delete_for_list(self, db: AsyncSession, list_id: int) -> int:
        res = await db.execute(sa_delete(Todo).where(Todo.list_id == list_id))
        return res.rowcount or 0
