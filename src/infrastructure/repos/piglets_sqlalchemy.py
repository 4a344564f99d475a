from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.piglet import Piglet
from src.infrastructure.db.orm.piglet import PigletORM

_MUTABLE_FIELDS = (
    "ear_tag",
    "sex",
    "current_status",
    "birth_weight_kg",
    "weaning_date",
    "weaning_weight_kg",
    "exit_date",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class PigletsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PigletORM) -> Piglet:
        return Piglet(
            id=orm.id,
            birth_id=orm.birth_id,
            sow_id=orm.sow_id,
            ear_tag=orm.ear_tag,
            sex=orm.sex,
            birth_status=orm.birth_status,
            current_status=orm.current_status,
            birth_weight_kg=orm.birth_weight_kg,
            weaning_date=orm.weaning_date,
            weaning_weight_kg=orm.weaning_weight_kg,
            exit_date=orm.exit_date,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _to_orm(self, piglet: Piglet) -> PigletORM:
        return PigletORM(
            id=piglet.id,
            birth_id=piglet.birth_id,
            sow_id=piglet.sow_id,
            ear_tag=piglet.ear_tag,
            sex=piglet.sex,
            birth_status=piglet.birth_status,
            current_status=piglet.current_status,
            birth_weight_kg=piglet.birth_weight_kg,
            weaning_date=piglet.weaning_date,
            weaning_weight_kg=piglet.weaning_weight_kg,
            exit_date=piglet.exit_date,
            notes=piglet.notes,
            created_by=piglet.created_by,
            updated_by=piglet.updated_by,
            created_at=piglet.created_at,
            updated_at=piglet.updated_at,
            version=piglet.version,
        )

    async def add(self, piglet: Piglet) -> Piglet:
        orm = self._to_orm(piglet)
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def add_many(self, piglets: list[Piglet]) -> list[Piglet]:
        orms = [self._to_orm(p) for p in piglets]
        self.session.add_all(orms)
        await self.session.flush()
        return [self._to_domain(orm) for orm in orms]

    async def get(self, piglet_id: UUID) -> Piglet | None:
        orm = await self.session.get(PigletORM, piglet_id)
        return self._to_domain(orm) if orm else None

    async def update(self, piglet: Piglet) -> Piglet:
        orm = await self.session.get(PigletORM, piglet.id)
        if not orm:
            raise ValueError(f"Piglet {piglet.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(piglet, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, piglet_id: UUID) -> None:
        await self.session.execute(delete(PigletORM).where(PigletORM.id == piglet_id))

    async def list_for_birth(self, birth_id: UUID) -> list[Piglet]:
        stmt = (
            select(PigletORM)
            .where(PigletORM.birth_id == birth_id)
            .order_by(PigletORM.created_at, PigletORM.ear_tag)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Piglet]:
        stmt = select(PigletORM).where(PigletORM.sow_id == sow_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_for_birth(self, birth_id: UUID, birth_status: str | None = None) -> int:
        stmt = select(func.count()).select_from(PigletORM).where(PigletORM.birth_id == birth_id)
        if birth_status:
            stmt = stmt.where(PigletORM.birth_status == birth_status)
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)
