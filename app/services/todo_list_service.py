import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, ListNotEmptyError, NotFoundError
from app.models.todo_list import TodoList
from app.repositories.todo_list_repo import TodoListRepository
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo_list import TodoListCreate, TodoListUpdate

logger = logging.getLogger(__name__)


class TodoListService:
    def __init__(self):
        self.repo = TodoListRepository()
        self.todo_repo = TodoRepository()

    async def create_list(self, db: AsyncSession, list_in: TodoListCreate) -> TodoList:
        todo_list = TodoList(**list_in.model_dump(exclude_none=True))
        try:
            await self.repo.create(db, todo_list)
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise ConflictError(
                "List could not be created",
                {"id": list_in.id},
            ) from exc
        logger.info("Created list %s", todo_list.id)
        return todo_list

    async def list_lists(self, db: AsyncSession, limit: int | None = None, offset: int = 0) -> list[TodoList]:
        return await self.repo.list_lists(db, limit=limit, offset=offset)

    async def get_list(self, db: AsyncSession, list_id: int) -> TodoList:
        todo_list = await self.repo.get(db, list_id)
        if todo_list is None:
            raise NotFoundError("List not found", {"list_id": list_id})
        return todo_list

    async def rename_list(self, db: AsyncSession, list_id: int, list_in: TodoListUpdate) -> TodoList:
        todo_list = await self.get_list(db, list_id)
        await self.repo.update(db, todo_list, list_in.model_dump(), fields={"name"})
        await db.commit()
        return todo_list

    async def delete_list(self, db: AsyncSession, list_id: int, cascade: bool = False) -> None:
        """
        Delete a list. A list that still has todos is only deleted when
        ``cascade`` is set, in which case its todos go in the same transaction.
        """
        await self.get_list(db, list_id)
        remaining = await self.todo_repo.count(db, list_id=list_id)
        if remaining and not cascade:
            raise ListNotEmptyError(
                "List still has todos",
                {"list_id": list_id, "todos": remaining},
            )
        try:
            if remaining:
                deleted = await self.todo_repo.delete_for_list(db, list_id)
                logger.info("Cascade deleted %s todos of list %s", deleted, list_id)
            await self.repo.delete(db, list_id)
            await db.commit()
        except IntegrityError as exc:
            # a todo was added concurrently
            await db.rollback()
            raise ListNotEmptyError("List still has todos", {"list_id": list_id}) from exc
        logger.info("Deleted list %s", list_id)

    async def list_todos(self, db: AsyncSession, list_id: int, checked: bool | None = None):
        await self.get_list(db, list_id)
        return await self.todo_repo.list_for_list(db, list_id, checked=checked)
