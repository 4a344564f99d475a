from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.errors import NotFound
from src.application.use_cases.sows import (
    create_sow,
    deactivate_sow,
    get_reproductive_status,
    list_sows,
    update_sow,
)
from src.interfaces.http.deps import get_actor, get_uow
from src.interfaces.http.schemas.reproduction import ReproductiveStatusResponse
from src.interfaces.http.schemas.sows import (
    SowCreate,
    SowListResponse,
    SowResponse,
    SowUpdate,
)

router = APIRouter(prefix="/sows", tags=["sows"])


@router.post("", response_model=SowResponse, status_code=status.HTTP_201_CREATED)
async def create_sow_endpoint(
    payload: SowCreate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    sow = await create_sow.execute(
        uow, create_sow.CreateSowInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return sow


@router.get("", response_model=SowListResponse)
async def list_sows_endpoint(
    status: str | None = None,
    reproductive_status: str | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    result = await list_sows.execute(
        uow,
        status=status,
        reproductive_status=reproductive_status,
        limit=limit,
        offset=offset,
    )
    return {"items": result.items, "total": result.total, "limit": limit, "offset": offset}


@router.get("/{sow_id}", response_model=SowResponse)
async def get_sow_endpoint(sow_id: UUID, uow=Depends(get_uow)):
    sow = await uow.sows.get(sow_id)
    if not sow:
        raise NotFound("Sow not found")
    return sow


@router.patch("/{sow_id}", response_model=SowResponse)
async def update_sow_endpoint(
    sow_id: UUID,
    payload: SowUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    sow = await update_sow.execute(
        uow, sow_id, update_sow.UpdateSowInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return sow


@router.delete("/{sow_id}", response_model=SowResponse)
async def deactivate_sow_endpoint(
    sow_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    sow = await deactivate_sow.execute(uow, sow_id, actor=actor)
    await uow.commit()
    return sow


@router.get("/{sow_id}/reproductive-status", response_model=ReproductiveStatusResponse)
async def reproductive_status_endpoint(sow_id: UUID, uow=Depends(get_uow)):
    view = await get_reproductive_status.execute(uow, sow_id)
    return {
        "sow_id": view.sow.id,
        "ear_tag": view.sow.ear_tag,
        "reproductive_status": view.sow.reproductive_status,
        "derived_status": view.derived_status,
        "in_sync": view.in_sync,
        "expected_farrowing_date": view.sow.expected_farrowing_date,
        "parity_count": view.sow.parity_count,
        "nursing_piglets": view.nursing_piglets,
        "last_heat": view.last_heat,
        "last_service": view.last_service,
        "active_pregnancy": view.active_pregnancy,
        "last_birth": view.last_birth,
        "last_abortion": view.last_abortion,
    }
