from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.domain.models.boar import Boar
from src.infrastructure.db.orm.boar import BoarORM


class BoarsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BoarORM) -> Boar:
        return Boar(
            id=orm.id,
            ear_tag=orm.ear_tag,
            name=orm.name,
            breed=orm.breed,
            birth_date=orm.birth_date,
            status=orm.status,
            notes=orm.notes,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, boar: Boar) -> Boar:
        orm = BoarORM(
            id=boar.id,
            ear_tag=boar.ear_tag,
            name=boar.name,
            breed=boar.breed,
            birth_date=boar.birth_date,
            status=boar.status,
            notes=boar.notes,
            created_by=boar.created_by,
            updated_by=boar.updated_by,
            created_at=boar.created_at,
            updated_at=boar.updated_at,
            version=boar.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Boar ear tag already exists") from exc
        return self._to_domain(orm)

    async def get(self, boar_id: UUID) -> Boar | None:
        orm = await self.session.get(BoarORM, boar_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, status: str | None = None) -> list[Boar]:
        stmt = select(BoarORM)
        if status:
            stmt = stmt.where(BoarORM.status == status)
        result = await self.session.execute(stmt.order_by(BoarORM.ear_tag))
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, boar: Boar) -> Boar:
        orm = await self.session.get(BoarORM, boar.id)
        if not orm:
            raise ValueError(f"Boar {boar.id} not found")
        orm.ear_tag = boar.ear_tag
        orm.name = boar.name
        orm.breed = boar.breed
        orm.birth_date = boar.birth_date
        orm.status = boar.status
        orm.notes = boar.notes
        orm.updated_by = boar.updated_by
        orm.updated_at = boar.updated_at
        orm.version = boar.version
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Boar ear tag already exists") from exc
        return self._to_domain(orm)
