from sqlalchemy.ext.asyncio import AsyncSession
from app.models.todo_list import TodoList
from app.repositories.base import BaseRepository

class TodoListRepository(BaseRepository[TodoList]):
    def __init__(self):
        super().__init__(TodoList)

    async def list_lists(self, db: AsyncSession, limit: int | None = None, offset: int = 0) -> list[TodoList]:
        return await self.list(db, order_by=(TodoList.id,), limit=limit, offset=offset)
