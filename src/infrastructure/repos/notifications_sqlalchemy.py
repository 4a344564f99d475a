from __future__ import annotations

import json
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.notification import Notification
from src.infrastructure.db.orm.notification import NotificationORM


class NotificationsSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: NotificationORM) -> Notification:
        data = json.loads(orm.data) if orm.data else None
        return Notification(
            id=orm.id,
            type=orm.type,
            priority=orm.priority,
            title=orm.title,
            message=orm.message,
            related_id=orm.related_id,
            data=data,
            read=orm.read,
            expires_at=orm.expires_at,
            created_at=orm.created_at,
            read_at=orm.read_at,
        )

    def _to_orm(self, notification: Notification) -> NotificationORM:
        data_str = json.dumps(notification.data) if notification.data else None
        return NotificationORM(
            id=notification.id,
            type=notification.type,
            priority=notification.priority,
            title=notification.title,
            message=notification.message,
            related_id=notification.related_id,
            data=data_str,
            read=notification.read,
            expires_at=notification.expires_at,
            created_at=notification.created_at,
            read_at=notification.read_at,
        )

    async def add(self, notification: Notification) -> Notification:
        orm = self._to_orm(notification)
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, notification_id: UUID) -> Notification | None:
        stmt = select(NotificationORM).where(NotificationORM.id == notification_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        unread_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        stmt = (
            select(NotificationORM)
            .order_by(NotificationORM.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        if unread_only:
            stmt = stmt.where(NotificationORM.read == False)  # noqa: E712

        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_unread(self) -> int:
        stmt = select(func.count()).where(NotificationORM.read == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def mark_as_read(self, notification_ids: list[UUID]) -> int:
        stmt = (
            update(NotificationORM)
            .where(NotificationORM.id.in_(notification_ids), NotificationORM.read == False)  # noqa: E712
            .values(read=True, read_at=func.now())
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def mark_all_as_read(self) -> int:
        stmt = (
            update(NotificationORM)
            .where(NotificationORM.read == False)  # noqa: E712
            .values(read=True, read_at=func.now())
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def exists_since(
        self,
        type: str,
        related_id: UUID,
        since: datetime,
        *,
        unread_only: bool = False,
    ) -> bool:
        stmt = (
            select(func.count())
            .select_from(NotificationORM)
            .where(NotificationORM.type == type)
            .where(NotificationORM.related_id == related_id)
            .where(NotificationORM.created_at >= since)
        )
        if unread_only:
            stmt = stmt.where(NotificationORM.read == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0) > 0

    async def delete_read_before(self, cutoff: datetime) -> int:
        stmt = (
            delete(NotificationORM)
            .where(NotificationORM.read == True)  # noqa: E712
            .where(NotificationORM.created_at < cutoff)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_expired(self, now: datetime) -> int:
        stmt = (
            delete(NotificationORM)
            .where(NotificationORM.expires_at.is_not(None))
            .where(NotificationORM.expires_at < now)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
