from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.heat import Heat, HeatStatus
from src.infrastructure.db.orm.heat import HeatORM
from src.infrastructure.db.orm.service import ServiceORM

_MUTABLE_FIELDS = (
    "heat_date",
    "heat_end_date",
    "intensity",
    "status",
    "induced",
    "induction_protocol",
    "detected_by",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class HeatsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HeatORM) -> Heat:
        return Heat(
            id=orm.id,
            sow_id=orm.sow_id,
            heat_date=orm.heat_date,
            heat_end_date=orm.heat_end_date,
            intensity=orm.intensity,
            status=orm.status,
            induced=orm.induced,
            induction_protocol=orm.induction_protocol,
            detected_by=orm.detected_by,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, heat: Heat) -> Heat:
        orm = HeatORM(
            id=heat.id,
            sow_id=heat.sow_id,
            heat_date=heat.heat_date,
            heat_end_date=heat.heat_end_date,
            intensity=heat.intensity,
            status=heat.status,
            induced=heat.induced,
            induction_protocol=heat.induction_protocol,
            detected_by=heat.detected_by,
            notes=heat.notes,
            created_by=heat.created_by,
            updated_by=heat.updated_by,
            created_at=heat.created_at,
            updated_at=heat.updated_at,
            version=heat.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, heat_id: UUID) -> Heat | None:
        orm = await self.session.get(HeatORM, heat_id)
        return self._to_domain(orm) if orm else None

    async def update(self, heat: Heat) -> Heat:
        orm = await self.session.get(HeatORM, heat.id)
        if not orm:
            raise ValueError(f"Heat {heat.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(heat, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, heat_id: UUID) -> None:
        await self.session.execute(delete(HeatORM).where(HeatORM.id == heat_id))

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Heat]:
        stmt = select(HeatORM)
        if sow_id:
            stmt = stmt.where(HeatORM.sow_id == sow_id)
        if status:
            stmt = stmt.where(HeatORM.status == status)
        stmt = stmt.order_by(HeatORM.heat_date.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Heat]:
        # populate_existing: mark_not_serviced bypasses the identity map
        stmt = (
            select(HeatORM)
            .where(HeatORM.sow_id == sow_id)
            .order_by(HeatORM.heat_date)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_unserviced_before(self, cutoff: date) -> list[Heat]:
        """Detected heats without services whose window ended before ``cutoff``."""
        has_service = select(ServiceORM.id).where(ServiceORM.heat_id == HeatORM.id).exists()
        window_end = func.coalesce(HeatORM.heat_end_date, HeatORM.heat_date)
        stmt = (
            select(HeatORM)
            .where(HeatORM.status == HeatStatus.DETECTED.value)
            .where(window_end < cutoff)
            .where(~has_service)
            .order_by(HeatORM.heat_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def mark_not_serviced(self, heat_id: UUID, updated_by: str | None = None) -> bool:
        """Flip a still-unserviced detected heat to not_serviced.

        Returns False when the heat was serviced or changed in the meantime.
        """
        has_service = select(ServiceORM.id).where(ServiceORM.heat_id == HeatORM.id).exists()
        stmt = (
            update(HeatORM)
            .where(HeatORM.id == heat_id)
            .where(HeatORM.status == HeatStatus.DETECTED.value)
            .where(~has_service)
            .values(
                status=HeatStatus.NOT_SERVICED.value,
                updated_by=updated_by,
                updated_at=datetime.now(timezone.utc),
                version=HeatORM.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_detected_between(self, start: date, end: date) -> list[Heat]:
        has_service = select(ServiceORM.id).where(ServiceORM.heat_id == HeatORM.id).exists()
        stmt = (
            select(HeatORM)
            .where(HeatORM.status == HeatStatus.DETECTED.value)
            .where(and_(HeatORM.heat_date >= start, HeatORM.heat_date <= end))
            .where(~has_service)
            .order_by(HeatORM.heat_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
