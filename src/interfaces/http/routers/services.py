from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.errors import NotFound
from src.application.use_cases.services import delete_service, register_service, update_service
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import get_actor, get_periods, get_uow
from src.interfaces.http.schemas.services import (
    ServiceCreate,
    ServiceCreatedResponse,
    ServiceResponse,
    ServiceUpdate,
)

router = APIRouter(prefix="/services", tags=["services"])


@router.post("", response_model=ServiceCreatedResponse, status_code=status.HTTP_201_CREATED)
async def register_service_endpoint(
    payload: ServiceCreate,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    result = await register_service.execute(
        uow,
        register_service.RegisterServiceInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await uow.commit()
    data = ServiceCreatedResponse.model_validate(result.service)
    data.warnings = result.warnings
    return data


@router.get("", response_model=list[ServiceResponse])
async def list_services_endpoint(
    sow_id: UUID | None = None,
    heat_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    return await uow.services.list(sow_id=sow_id, heat_id=heat_id, limit=limit, offset=offset)


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service_endpoint(service_id: UUID, uow=Depends(get_uow)):
    service = await uow.services.get(service_id)
    if not service:
        raise NotFound("Service not found")
    return service


@router.patch("/{service_id}", response_model=ServiceResponse)
async def update_service_endpoint(
    service_id: UUID,
    payload: ServiceUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    service = await update_service.execute(
        uow, service_id, update_service.UpdateServiceInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service_endpoint(
    service_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_service.execute(uow, service_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
