from __future__ import annotations
from typing import Any, Generic, Sequence, Set, TypeVar
from sqlalchemy import select, func, delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.inspection import inspect as sa_inspect

T = TypeVar("T")  # SQLAlchemy model class (Declarative)

class BaseRepository(Generic[T]):
    """
    SQLAlchemy 2.x / Async 用の共通リポジトリ。
    - flush までを担当し、commit/rollback は呼び出し側（サービス）で行う。
    - 単一主キーのモデルのみ対応。
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model
        pk_cols = sa_inspect(model).primary_key
        if len(pk_cols) != 1:
            raise ValueError(f"{model.__name__}: composite primary key is not supported")
        self.pk_col = pk_cols[0]

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        """主キー1件取得"""
        return await session.get(self.model, pk)

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        """存在確認（等価条件のみ）"""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one()) > 0

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        """件数"""
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one())

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
        limit: int | None = 100,
        offset: int | None = 0,
    ) -> list[T]:
        """一覧。order_by 未指定なら主キー昇順"""
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        stmt = stmt.order_by(*(order_by or (self.pk_col,)))
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        新規作成（transient のみ）。
        - add → flush で主キーが採番される（指定済みならその値）
        """
        state = sa_inspect(obj)
        if not state.transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        await session.flush()
        return obj

    async def update(
        self,
        session: AsyncSession,
        obj: T,
        values: dict[str, Any],
        *,
        fields: Set[str] | None = None,
    ) -> T:
        """
        部分更新。values のうち fields（None なら全カラム）に含まれるものだけ反映。
        - PK列は更新対象から除外
        """
        columns = {c.key for c in sa_inspect(self.model).columns}
        allowed = columns if fields is None else columns & set(fields)
        allowed.discard(self.pk_col.key)
        for name, value in values.items():
            if name in allowed:
                setattr(obj, name, value)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, pk: Any) -> bool:
        """主キー削除（削除できたかを返す）"""
        stmt = sa_delete(self.model).where(self.pk_col == pk)
        res = await session.execute(stmt)
        return (res.rowcount or 0) > 0
