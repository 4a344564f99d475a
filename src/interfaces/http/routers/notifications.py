from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from src.application.errors import NotFound
from src.application.use_cases.notifications import generate_notifications
from src.config.settings import Settings
from src.interfaces.http.deps import get_app_settings, get_uow
from src.interfaces.http.schemas.notifications import (
    GenerateNotificationsResponse,
    MarkAsReadRequest,
    MarkAsReadResponse,
    NotificationListResponse,
    NotificationSchema,
)
from src.utils.datetime_tz import today_local

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = False,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    notifications = await uow.notifications.list(
        unread_only=unread_only, limit=limit, offset=offset
    )
    unread_count = await uow.notifications.count_unread()
    return {
        "notifications": notifications,
        "total": len(notifications),
        "unread_count": unread_count,
    }


@router.get("/unread-count")
async def get_unread_count(uow=Depends(get_uow)):
    return {"unread_count": await uow.notifications.count_unread()}


@router.post("/mark-read", response_model=MarkAsReadResponse)
async def mark_as_read(request: MarkAsReadRequest, uow=Depends(get_uow)):
    count = await uow.notifications.mark_as_read(request.notification_ids)
    await uow.commit()
    return {"marked_count": count}


@router.post("/mark-all-read", response_model=MarkAsReadResponse)
async def mark_all_as_read(uow=Depends(get_uow)):
    count = await uow.notifications.mark_all_as_read()
    await uow.commit()
    return {"marked_count": count}


@router.get("/{notification_id}", response_model=NotificationSchema)
async def get_notification(notification_id: UUID, uow=Depends(get_uow)):
    notification = await uow.notifications.get(notification_id)
    if not notification:
        raise NotFound("Notification not found")
    return notification


@router.post("/generate", response_model=GenerateNotificationsResponse)
async def generate_notifications_endpoint(
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    """Run the reminder generator now instead of waiting for the scheduler."""
    result = await generate_notifications.execute(
        uow,
        today=today_local(),
        farrowing_alert_days=settings.farrowing_alert_days,
        confirmation_due_days=settings.pregnancy_confirmation_due_days,
        retention_days=settings.notification_retention_days,
    )
    await uow.commit()
    return result
