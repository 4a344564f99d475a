from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.errors import NotFound
from src.application.use_cases.boars import create_boar, update_boar
from src.interfaces.http.deps import get_actor, get_uow
from src.interfaces.http.schemas.boars import BoarCreate, BoarResponse, BoarUpdate

router = APIRouter(prefix="/boars", tags=["boars"])


@router.post("", response_model=BoarResponse, status_code=status.HTTP_201_CREATED)
async def create_boar_endpoint(
    payload: BoarCreate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    boar = await create_boar.execute(
        uow, create_boar.CreateBoarInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return boar


@router.get("", response_model=list[BoarResponse])
async def list_boars_endpoint(status: str | None = None, uow=Depends(get_uow)):
    return await uow.boars.list(status=status)


@router.get("/{boar_id}", response_model=BoarResponse)
async def get_boar_endpoint(boar_id: UUID, uow=Depends(get_uow)):
    boar = await uow.boars.get(boar_id)
    if not boar:
        raise NotFound("Boar not found")
    return boar


@router.patch("/{boar_id}", response_model=BoarResponse)
async def update_boar_endpoint(
    boar_id: UUID,
    payload: BoarUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    boar = await update_boar.execute(
        uow, boar_id, update_boar.UpdateBoarInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return boar
