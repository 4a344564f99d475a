from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.pregnancy import Pregnancy, PregnancyStatus
from src.infrastructure.db.orm.pregnancy import PregnancyORM

_MUTABLE_FIELDS = (
    "conception_date",
    "expected_farrowing_date",
    "status",
    "confirmed",
    "confirmation_date",
    "confirmation_method",
    "ultrasound_count",
    "last_ultrasound_date",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class PregnanciesSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PregnancyORM) -> Pregnancy:
        return Pregnancy(
            id=orm.id,
            sow_id=orm.sow_id,
            service_id=orm.service_id,
            conception_date=orm.conception_date,
            expected_farrowing_date=orm.expected_farrowing_date,
            status=orm.status,
            confirmed=orm.confirmed,
            confirmation_date=orm.confirmation_date,
            confirmation_method=orm.confirmation_method,
            ultrasound_count=orm.ultrasound_count,
            last_ultrasound_date=orm.last_ultrasound_date,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, pregnancy: Pregnancy) -> Pregnancy:
        orm = PregnancyORM(
            id=pregnancy.id,
            sow_id=pregnancy.sow_id,
            service_id=pregnancy.service_id,
            conception_date=pregnancy.conception_date,
            expected_farrowing_date=pregnancy.expected_farrowing_date,
            status=pregnancy.status,
            confirmed=pregnancy.confirmed,
            confirmation_date=pregnancy.confirmation_date,
            confirmation_method=pregnancy.confirmation_method,
            ultrasound_count=pregnancy.ultrasound_count,
            last_ultrasound_date=pregnancy.last_ultrasound_date,
            notes=pregnancy.notes,
            created_by=pregnancy.created_by,
            updated_by=pregnancy.updated_by,
            created_at=pregnancy.created_at,
            updated_at=pregnancy.updated_at,
            version=pregnancy.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, pregnancy_id: UUID) -> Pregnancy | None:
        orm = await self.session.get(PregnancyORM, pregnancy_id)
        return self._to_domain(orm) if orm else None

    async def update(self, pregnancy: Pregnancy) -> Pregnancy:
        orm = await self.session.get(PregnancyORM, pregnancy.id)
        if not orm:
            raise ValueError(f"Pregnancy {pregnancy.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(pregnancy, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, pregnancy_id: UUID) -> None:
        await self.session.execute(delete(PregnancyORM).where(PregnancyORM.id == pregnancy_id))

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        status: str | None = None,
        confirmed: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Pregnancy]:
        stmt = select(PregnancyORM)
        if sow_id:
            stmt = stmt.where(PregnancyORM.sow_id == sow_id)
        if status:
            stmt = stmt.where(PregnancyORM.status == status)
        if confirmed is not None:
            stmt = stmt.where(PregnancyORM.confirmed == confirmed)
        stmt = stmt.order_by(PregnancyORM.conception_date.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Pregnancy]:
        stmt = (
            select(PregnancyORM)
            .where(PregnancyORM.sow_id == sow_id)
            .order_by(PregnancyORM.conception_date, PregnancyORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_service(self, service_id: UUID) -> list[Pregnancy]:
        stmt = select(PregnancyORM).where(PregnancyORM.service_id == service_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_farrowing_between(self, start: date, end: date) -> list[Pregnancy]:
        stmt = (
            select(PregnancyORM)
            .where(PregnancyORM.status == PregnancyStatus.IN_PROGRESS.value)
            .where(PregnancyORM.confirmed.is_(True))
            .where(PregnancyORM.expected_farrowing_date >= start)
            .where(PregnancyORM.expected_farrowing_date <= end)
            .order_by(PregnancyORM.expected_farrowing_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_unconfirmed_conceived_before(self, cutoff: date) -> list[Pregnancy]:
        stmt = (
            select(PregnancyORM)
            .where(PregnancyORM.status == PregnancyStatus.IN_PROGRESS.value)
            .where(PregnancyORM.confirmed.is_(False))
            .where(PregnancyORM.conception_date < cutoff)
            .order_by(PregnancyORM.conception_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
