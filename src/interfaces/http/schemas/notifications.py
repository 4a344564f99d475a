from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class NotificationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: str
    title: str
    message: str
    priority: str
    related_id: UUID | None = None
    data: dict | None = None
    read: bool
    expires_at: datetime | None = None
    created_at: datetime
    read_at: datetime | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationSchema]
    total: int
    unread_count: int


class MarkAsReadRequest(BaseModel):
    notification_ids: list[UUID]


class MarkAsReadResponse(BaseModel):
    marked_count: int


class GenerateNotificationsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    farrowing_soon: int
    heat_not_serviced: int
    pregnancy_confirmation_due: int
    cleaned_up: int
