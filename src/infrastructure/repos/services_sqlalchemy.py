from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.service import Service
from src.infrastructure.db.orm.service import ServiceORM

_MUTABLE_FIELDS = (
    "boar_id",
    "service_date",
    "service_time",
    "service_type",
    "service_number",
    "mating_duration_minutes",
    "mating_quality",
    "semen_batch",
    "semen_dose",
    "semen_volume_ml",
    "technician",
    "success",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class ServicesSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ServiceORM) -> Service:
        return Service(
            id=orm.id,
            sow_id=orm.sow_id,
            heat_id=orm.heat_id,
            boar_id=orm.boar_id,
            service_date=orm.service_date,
            service_time=orm.service_time,
            service_type=orm.service_type,
            service_number=orm.service_number,
            mating_duration_minutes=orm.mating_duration_minutes,
            mating_quality=orm.mating_quality,
            semen_batch=orm.semen_batch,
            semen_dose=orm.semen_dose,
            semen_volume_ml=orm.semen_volume_ml,
            technician=orm.technician,
            success=orm.success,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, service: Service) -> Service:
        orm = ServiceORM(
            id=service.id,
            sow_id=service.sow_id,
            heat_id=service.heat_id,
            boar_id=service.boar_id,
            service_date=service.service_date,
            service_time=service.service_time,
            service_type=service.service_type,
            service_number=service.service_number,
            mating_duration_minutes=service.mating_duration_minutes,
            mating_quality=service.mating_quality,
            semen_batch=service.semen_batch,
            semen_dose=service.semen_dose,
            semen_volume_ml=service.semen_volume_ml,
            technician=service.technician,
            success=service.success,
            notes=service.notes,
            created_by=service.created_by,
            updated_by=service.updated_by,
            created_at=service.created_at,
            updated_at=service.updated_at,
            version=service.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, service_id: UUID) -> Service | None:
        orm = await self.session.get(ServiceORM, service_id)
        return self._to_domain(orm) if orm else None

    async def update(self, service: Service) -> Service:
        orm = await self.session.get(ServiceORM, service.id)
        if not orm:
            raise ValueError(f"Service {service.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(service, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, service_id: UUID) -> None:
        await self.session.execute(delete(ServiceORM).where(ServiceORM.id == service_id))

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        heat_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Service]:
        stmt = select(ServiceORM)
        if sow_id:
            stmt = stmt.where(ServiceORM.sow_id == sow_id)
        if heat_id:
            stmt = stmt.where(ServiceORM.heat_id == heat_id)
        stmt = stmt.order_by(ServiceORM.service_date.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Service]:
        stmt = (
            select(ServiceORM)
            .where(ServiceORM.sow_id == sow_id)
            .order_by(ServiceORM.service_date, ServiceORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_heat(self, heat_id: UUID) -> list[Service]:
        stmt = (
            select(ServiceORM)
            .where(ServiceORM.heat_id == heat_id)
            .order_by(ServiceORM.service_date, ServiceORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
