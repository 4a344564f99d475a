from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from uuid import UUID

from src.application.errors import ImmutableRecordError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.service import Service, ServiceType

_EDITABLE_FIELDS = (
    "service_date",
    "service_time",
    "boar_id",
    "mating_duration_minutes",
    "mating_quality",
    "semen_batch",
    "semen_dose",
    "semen_volume_ml",
    "technician",
    "notes",
)


@dataclass(slots=True)
class UpdateServiceInput:
    service_date: date | None = None
    service_type: str | None = None
    service_time: time | None = None
    boar_id: UUID | None = None
    mating_duration_minutes: int | None = None
    mating_quality: str | None = None
    semen_batch: str | None = None
    semen_dose: str | None = None
    semen_volume_ml: Decimal | None = None
    technician: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, service_id: UUID, payload: UpdateServiceInput, actor: str | None = None
) -> Service:
    service = await uow.services.get(service_id)
    if not service:
        raise NotFound("Service not found")

    pregnancies = await uow.pregnancies.list_for_service(service_id)
    if any(p.confirmed for p in pregnancies):
        raise ImmutableRecordError("Service has a confirmed pregnancy and can no longer be edited")

    if payload.service_type is not None:
        if payload.service_type not in {t.value for t in ServiceType}:
            raise ValidationError(f"Invalid service type '{payload.service_type}'")
        service.service_type = payload.service_type
    if payload.boar_id is not None and payload.boar_id != service.boar_id:
        boar = await uow.boars.get(payload.boar_id)
        if not boar:
            raise NotFound(f"Boar {payload.boar_id} not found")
    for field_name in _EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            setattr(service, field_name, value)
    service.clear_foreign_type_fields()

    service.updated_by = actor
    service.bump_version()
    updated = await uow.services.update(service)
    await refresh_sow_state(uow, service.sow_id, actor=actor)
    return updated
