from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from src.application.errors import NotFound
from src.application.use_cases.abortions import (
    delete_abortion,
    record_abortion,
    update_abortion,
)
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import commit_and_dispatch, get_actor, get_periods, get_uow
from src.interfaces.http.schemas.abortions import (
    AbortionCreate,
    AbortionResponse,
    AbortionUpdate,
)

router = APIRouter(prefix="/abortions", tags=["abortions"])


@router.post("", response_model=AbortionResponse, status_code=status.HTTP_201_CREATED)
async def record_abortion_endpoint(
    payload: AbortionCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    abortion = await record_abortion.execute(
        uow,
        record_abortion.RecordAbortionInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return abortion


@router.get("", response_model=list[AbortionResponse])
async def list_abortions_endpoint(
    sow_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    return await uow.abortions.list(sow_id=sow_id, limit=limit, offset=offset)


@router.get("/{abortion_id}", response_model=AbortionResponse)
async def get_abortion_endpoint(abortion_id: UUID, uow=Depends(get_uow)):
    abortion = await uow.abortions.get(abortion_id)
    if not abortion:
        raise NotFound("Abortion not found")
    return abortion


@router.patch("/{abortion_id}", response_model=AbortionResponse)
async def update_abortion_endpoint(
    abortion_id: UUID,
    payload: AbortionUpdate,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    abortion = await update_abortion.execute(
        uow,
        abortion_id,
        update_abortion.UpdateAbortionInput(**payload.model_dump()),
        periods=periods,
        actor=actor,
    )
    await uow.commit()
    return abortion


@router.delete("/{abortion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_abortion_endpoint(
    abortion_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_abortion.execute(uow, abortion_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
