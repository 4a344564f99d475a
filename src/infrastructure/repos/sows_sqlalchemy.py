from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.sows import SowsRepository
from src.domain.models.sow import Sow
from src.infrastructure.db.orm.sow import SowORM


class SowsSQLAlchemyRepository(SowsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SowORM) -> Sow:
        return Sow(
            id=orm.id,
            ear_tag=orm.ear_tag,
            alias=orm.alias,
            breed=orm.breed,
            birth_date=orm.birth_date,
            status=orm.status,
            reproductive_status=orm.reproductive_status,
            expected_farrowing_date=orm.expected_farrowing_date,
            parity_count=orm.parity_count,
            total_piglets_born=orm.total_piglets_born,
            total_piglets_alive=orm.total_piglets_alive,
            total_piglets_dead=orm.total_piglets_dead,
            total_abortions=orm.total_abortions,
            last_farrowing_date=orm.last_farrowing_date,
            last_weaning_date=orm.last_weaning_date,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, sow: Sow) -> Sow:
        orm = SowORM(
            id=sow.id,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
            breed=sow.breed,
            birth_date=sow.birth_date,
            status=sow.status,
            reproductive_status=sow.reproductive_status,
            expected_farrowing_date=sow.expected_farrowing_date,
            parity_count=sow.parity_count,
            total_piglets_born=sow.total_piglets_born,
            total_piglets_alive=sow.total_piglets_alive,
            total_piglets_dead=sow.total_piglets_dead,
            total_abortions=sow.total_abortions,
            last_farrowing_date=sow.last_farrowing_date,
            last_weaning_date=sow.last_weaning_date,
            notes=sow.notes,
            created_by=sow.created_by,
            updated_by=sow.updated_by,
            created_at=sow.created_at,
            updated_at=sow.updated_at,
            version=sow.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Sow ear tag already exists") from exc
        return self._to_domain(orm)

    async def get(self, sow_id: UUID) -> Sow | None:
        stmt = select(SowORM).where(SowORM.id == sow_id).execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    def _apply_filters(self, stmt, status, reproductive_status):
        if status:
            stmt = stmt.where(SowORM.status == status)
        if reproductive_status:
            stmt = stmt.where(SowORM.reproductive_status == reproductive_status)
        return stmt

    async def list(
        self,
        *,
        status: str | None = None,
        reproductive_status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Sow]:
        stmt = self._apply_filters(select(SowORM), status, reproductive_status)
        stmt = stmt.order_by(SowORM.ear_tag).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(
        self,
        *,
        status: str | None = None,
        reproductive_status: str | None = None,
    ) -> int:
        stmt = self._apply_filters(
            select(func.count()).select_from(SowORM), status, reproductive_status
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def update(self, sow_id: UUID, data: dict, expected_version: int) -> Sow | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(SowORM)
            .where(SowORM.id == sow_id)
            .where(SowORM.version == expected_version)
            .values(**values)
            .returning(SowORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update sow due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)
