import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, NotFoundError, ReferentialIntegrityError
from app.models.todo import Todo
from app.repositories.todo_list_repo import TodoListRepository
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()
        self.list_repo = TodoListRepository()

    async def _ensure_list(self, db: AsyncSession, list_id: int) -> None:
        if not await self.list_repo.exists(db, id=list_id):
            logger.warning("Rejected todo for unknown list %s", list_id)
            raise ReferentialIntegrityError(
                "Referenced list does not exist",
                {"list_id": list_id},
            )

    async def _integrity_failure(self, db: AsyncSession, list_id: int, todo_id):
        await db.rollback()
        # the engine rejected the write; work out whether the list vanished or the id is taken
        if not await self.list_repo.exists(db, id=list_id):
            logger.warning("Foreign key rejected todo for list %s", list_id)
            return ReferentialIntegrityError("Referenced list does not exist", {"list_id": list_id})
        return ConflictError("Todo could not be saved", {"id": todo_id})

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        await self._ensure_list(db, todo_in.list_id)
        todo = Todo(**todo_in.model_dump(exclude_none=True))
        try:
            await self.repo.create(db, todo)
            await db.commit()
        except IntegrityError as exc:
            raise await self._integrity_failure(db, todo_in.list_id, todo_in.id) from exc
        logger.info("Created todo %s in list %s", todo.id, todo.list_id)
        return todo

    async def list_todos(
        self,
        db: AsyncSession,
        list_id: int | None = None,
        checked: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Todo]:
        return await self.repo.list_todos(db, list_id=list_id, checked=checked, limit=limit, offset=offset)

    async def get_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        todo = await self.repo.get(db, todo_id)
        if todo is None:
            raise NotFoundError("Todo not found", {"todo_id": todo_id})
        return todo

    async def update_todo(self, db: AsyncSession, todo_id: int, todo_in: TodoUpdate) -> Todo:
        todo = await self.get_todo(db, todo_id)
        values = todo_in.model_dump(exclude_unset=True, exclude_none=True)
        if "list_id" in values and values["list_id"] != todo.list_id:
            await self._ensure_list(db, values["list_id"])
        list_id = values.get("list_id", todo.list_id)
        try:
            await self.repo.update(db, todo, values, fields={"text", "checked", "list_id"})
            await db.commit()
        except IntegrityError as exc:
            raise await self._integrity_failure(db, list_id, todo_id) from exc
        return todo

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> None:
        if not await self.repo.delete(db, todo_id):
            raise NotFoundError("Todo not found", {"todo_id": todo_id})
        await db.commit()
        logger.info("Deleted todo %s", todo_id)
