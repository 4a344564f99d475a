from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.domain.models.abortion import Abortion
from src.infrastructure.db.orm.abortion import AbortionORM

_MUTABLE_FIELDS = (
    "abortion_date",
    "gestation_days",
    "recovery_until",
    "fetuses_expelled",
    "suspected_cause",
    "veterinary_treatment",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class AbortionsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AbortionORM) -> Abortion:
        return Abortion(
            id=orm.id,
            sow_id=orm.sow_id,
            pregnancy_id=orm.pregnancy_id,
            abortion_date=orm.abortion_date,
            gestation_days=orm.gestation_days,
            recovery_until=orm.recovery_until,
            fetuses_expelled=orm.fetuses_expelled,
            suspected_cause=orm.suspected_cause,
            veterinary_treatment=orm.veterinary_treatment,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, abortion: Abortion) -> Abortion:
        orm = AbortionORM(
            id=abortion.id,
            sow_id=abortion.sow_id,
            pregnancy_id=abortion.pregnancy_id,
            abortion_date=abortion.abortion_date,
            gestation_days=abortion.gestation_days,
            recovery_until=abortion.recovery_until,
            fetuses_expelled=abortion.fetuses_expelled,
            suspected_cause=abortion.suspected_cause,
            veterinary_treatment=abortion.veterinary_treatment,
            notes=abortion.notes,
            created_by=abortion.created_by,
            updated_by=abortion.updated_by,
            created_at=abortion.created_at,
            updated_at=abortion.updated_at,
            version=abortion.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("An abortion is already recorded for this pregnancy") from exc
        return self._to_domain(orm)

    async def get(self, abortion_id: UUID) -> Abortion | None:
        orm = await self.session.get(AbortionORM, abortion_id)
        return self._to_domain(orm) if orm else None

    async def get_by_pregnancy(self, pregnancy_id: UUID) -> Abortion | None:
        stmt = select(AbortionORM).where(AbortionORM.pregnancy_id == pregnancy_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, abortion: Abortion) -> Abortion:
        orm = await self.session.get(AbortionORM, abortion.id)
        if not orm:
            raise ValueError(f"Abortion {abortion.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(abortion, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, abortion_id: UUID) -> None:
        await self.session.execute(delete(AbortionORM).where(AbortionORM.id == abortion_id))

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Abortion]:
        stmt = select(AbortionORM)
        if sow_id:
            stmt = stmt.where(AbortionORM.sow_id == sow_id)
        stmt = stmt.order_by(AbortionORM.abortion_date.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Abortion]:
        stmt = (
            select(AbortionORM)
            .where(AbortionORM.sow_id == sow_id)
            .order_by(AbortionORM.abortion_date, AbortionORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
