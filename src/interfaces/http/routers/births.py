from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Response, status

from src.application.errors import NotFound
from src.application.use_cases.births import delete_birth, record_birth, update_birth, wean_litter
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.interfaces.http.deps import commit_and_dispatch, get_actor, get_periods, get_uow
from src.interfaces.http.schemas.births import (
    BirthCreate,
    BirthResponse,
    BirthUpdate,
    WeanLitterResponse,
)
from src.interfaces.http.schemas.piglets import PigletResponse

router = APIRouter(prefix="/births", tags=["births"])


@router.post("", response_model=BirthResponse, status_code=status.HTTP_201_CREATED)
async def record_birth_endpoint(
    payload: BirthCreate,
    background_tasks: BackgroundTasks,
    request: Request,
    periods: ReproductivePeriods = Depends(get_periods),
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    birth = await record_birth.execute(
        uow, record_birth.RecordBirthInput(**payload.model_dump()), periods=periods, actor=actor
    )
    await commit_and_dispatch(uow, request, background_tasks)
    return birth


@router.get("", response_model=list[BirthResponse])
async def list_births_endpoint(
    sow_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
    uow=Depends(get_uow),
):
    return await uow.births.list(sow_id=sow_id, limit=limit, offset=offset)


@router.get("/{birth_id}", response_model=BirthResponse)
async def get_birth_endpoint(birth_id: UUID, uow=Depends(get_uow)):
    birth = await uow.births.get(birth_id)
    if not birth:
        raise NotFound("Birth not found")
    return birth


@router.get("/{birth_id}/piglets", response_model=list[PigletResponse])
async def list_litter_endpoint(birth_id: UUID, uow=Depends(get_uow)):
    if not await uow.births.get(birth_id):
        raise NotFound("Birth not found")
    return await uow.piglets.list_for_birth(birth_id)


@router.patch("/{birth_id}", response_model=BirthResponse)
async def update_birth_endpoint(
    birth_id: UUID,
    payload: BirthUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    birth = await update_birth.execute(
        uow, birth_id, update_birth.UpdateBirthInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return birth


@router.delete("/{birth_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_birth_endpoint(
    birth_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_birth.execute(uow, birth_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{birth_id}/wean", response_model=WeanLitterResponse)
async def wean_litter_endpoint(
    birth_id: UUID,
    background_tasks: BackgroundTasks,
    request: Request,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    result = await wean_litter.execute(uow, birth_id, actor=actor)
    await commit_and_dispatch(uow, request, background_tasks)
    return result
