from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from src.application.errors import NotFound
from src.application.use_cases.pregnancies import (
    confirm_pregnancy,
    delete_pregnancy,
    register_pregnancy,
    update_pregnancy,
)
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import commit_and_dispatch, get_actor, get_periods, get_uow
from src.interfaces.http.schemas.pregnancies import (
    PregnancyConfirm,
    PregnancyCreate,
    PregnancyCreatedResponse,
    PregnancyResponse,
    PregnancyUpdate,
)

router = APIRouter(prefix="/pregnancies", tags=["pregnancies"])


@router.post("", response_model=PregnancyCreatedResponse, status_code=status.HTTP_201_CREATED)
async def register_pregnancy_endpoint(
    payload: PregnancyCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    result = await register_pregnancy.execute(
        uow,
        register_pregnancy.RegisterPregnancyInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await commit_and_dispatch(uow, request, background_tasks)
    data = PregnancyCreatedResponse.model_validate(result.pregnancy)
    data.warnings = result.warnings
    return data


@router.get("", response_model=list[PregnancyResponse])
async def list_pregnancies_endpoint(
    sow_id: UUID | None = None,
    status: str | None = None,
    confirmed: bool | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    return await uow.pregnancies.list(
        sow_id=sow_id, status=status, confirmed=confirmed, limit=limit, offset=offset
    )


@router.get("/{pregnancy_id}", response_model=PregnancyResponse)
async def get_pregnancy_endpoint(pregnancy_id: UUID, uow=Depends(get_uow)):
    pregnancy = await uow.pregnancies.get(pregnancy_id)
    if not pregnancy:
        raise NotFound("Pregnancy not found")
    return pregnancy


@router.post("/{pregnancy_id}/confirm", response_model=PregnancyResponse)
async def confirm_pregnancy_endpoint(
    pregnancy_id: UUID,
    payload: PregnancyConfirm,
    background_tasks: BackgroundTasks,
    request: Request,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    pregnancy = await confirm_pregnancy.execute(
        uow,
        pregnancy_id,
        confirm_pregnancy.ConfirmPregnancyInput(**payload.model_dump()),
        actor=actor,
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return pregnancy


@router.patch("/{pregnancy_id}", response_model=PregnancyResponse)
async def update_pregnancy_endpoint(
    pregnancy_id: UUID,
    payload: PregnancyUpdate,
    background_tasks: BackgroundTasks,
    request: Request,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    pregnancy = await update_pregnancy.execute(
        uow,
        pregnancy_id,
        update_pregnancy.UpdatePregnancyInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return pregnancy


@router.delete("/{pregnancy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pregnancy_endpoint(
    pregnancy_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_pregnancy.execute(uow, pregnancy_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
