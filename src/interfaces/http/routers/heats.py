from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.errors import NotFound
from src.application.use_cases.heats import delete_heat, register_heat, update_heat
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import get_actor, get_periods, get_uow
from src.interfaces.http.schemas.heats import (
    HeatCreate,
    HeatCreatedResponse,
    HeatResponse,
    HeatUpdate,
)

router = APIRouter(prefix="/heats", tags=["heats"])


@router.post("", response_model=HeatCreatedResponse, status_code=status.HTTP_201_CREATED)
async def register_heat_endpoint(
    payload: HeatCreate,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    result = await register_heat.execute(
        uow,
        register_heat.RegisterHeatInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await uow.commit()
    data = HeatCreatedResponse.model_validate(result.heat)
    data.warnings = result.warnings
    return data


@router.get("", response_model=list[HeatResponse])
async def list_heats_endpoint(
    sow_id: UUID | None = None,
    status: str | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    return await uow.heats.list(sow_id=sow_id, status=status, limit=limit, offset=offset)


@router.get("/{heat_id}", response_model=HeatResponse)
async def get_heat_endpoint(heat_id: UUID, uow=Depends(get_uow)):
    heat = await uow.heats.get(heat_id)
    if not heat:
        raise NotFound("Heat not found")
    return heat


@router.patch("/{heat_id}", response_model=HeatResponse)
async def update_heat_endpoint(
    heat_id: UUID,
    payload: HeatUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    heat = await update_heat.execute(
        uow, heat_id, update_heat.UpdateHeatInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return heat


@router.delete("/{heat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_heat_endpoint(
    heat_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_heat.execute(uow, heat_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
