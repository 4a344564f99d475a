from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.domain.models.birth import Birth
from src.domain.models.piglet import PigletBirthStatus, PigletStatus
from src.infrastructure.db.orm.birth import BirthORM
from src.infrastructure.db.orm.piglet import PigletORM

_MUTABLE_FIELDS = (
    "boar_id",
    "birth_date",
    "birth_time",
    "birth_type",
    "born_alive",
    "born_dead",
    "mummified",
    "total_born",
    "gestation_days",
    "expected_weaning_date",
    "average_weight_kg",
    "sow_condition",
    "assisted_by",
    "notes",
    "updated_by",
    "updated_at",
    "version",
)


class BirthsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BirthORM) -> Birth:
        return Birth(
            id=orm.id,
            sow_id=orm.sow_id,
            pregnancy_id=orm.pregnancy_id,
            boar_id=orm.boar_id,
            birth_date=orm.birth_date,
            birth_time=orm.birth_time,
            birth_type=orm.birth_type,
            born_alive=orm.born_alive,
            born_dead=orm.born_dead,
            mummified=orm.mummified,
            total_born=orm.total_born,
            gestation_days=orm.gestation_days,
            expected_weaning_date=orm.expected_weaning_date,
            average_weight_kg=orm.average_weight_kg,
            sow_condition=orm.sow_condition,
            assisted_by=orm.assisted_by,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, birth: Birth) -> Birth:
        orm = BirthORM(
            id=birth.id,
            sow_id=birth.sow_id,
            pregnancy_id=birth.pregnancy_id,
            boar_id=birth.boar_id,
            birth_date=birth.birth_date,
            birth_time=birth.birth_time,
            birth_type=birth.birth_type,
            born_alive=birth.born_alive,
            born_dead=birth.born_dead,
            mummified=birth.mummified,
            total_born=birth.total_born,
            gestation_days=birth.gestation_days,
            expected_weaning_date=birth.expected_weaning_date,
            average_weight_kg=birth.average_weight_kg,
            sow_condition=birth.sow_condition,
            assisted_by=birth.assisted_by,
            notes=birth.notes,
            created_by=birth.created_by,
            updated_by=birth.updated_by,
            created_at=birth.created_at,
            updated_at=birth.updated_at,
            version=birth.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("A farrowing is already recorded for this pregnancy") from exc
        return self._to_domain(orm)

    async def get(self, birth_id: UUID) -> Birth | None:
        orm = await self.session.get(BirthORM, birth_id)
        return self._to_domain(orm) if orm else None

    async def get_by_pregnancy(self, pregnancy_id: UUID) -> Birth | None:
        stmt = select(BirthORM).where(BirthORM.pregnancy_id == pregnancy_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, birth: Birth) -> Birth:
        orm = await self.session.get(BirthORM, birth.id)
        if not orm:
            raise ValueError(f"Birth {birth.id} not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(birth, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, birth_id: UUID) -> None:
        await self.session.execute(delete(BirthORM).where(BirthORM.id == birth_id))

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Birth]:
        stmt = select(BirthORM)
        if sow_id:
            stmt = stmt.where(BirthORM.sow_id == sow_id)
        stmt = stmt.order_by(BirthORM.birth_date.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_for_sow(self, sow_id: UUID) -> list[Birth]:
        stmt = (
            select(BirthORM)
            .where(BirthORM.sow_id == sow_id)
            .order_by(BirthORM.birth_date, BirthORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_due_for_weaning(self, today: date) -> list[Birth]:
        """Births past their planned weaning date that still have a nursing piglet."""
        nursing = (
            select(PigletORM.id)
            .where(PigletORM.birth_id == BirthORM.id)
            .where(PigletORM.birth_status == PigletBirthStatus.ALIVE.value)
            .where(PigletORM.current_status == PigletStatus.LACTATING.value)
            .exists()
        )
        stmt = (
            select(BirthORM)
            .where(BirthORM.expected_weaning_date <= today)
            .where(BirthORM.born_alive > 0)
            .where(nursing)
            .order_by(BirthORM.expected_weaning_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
