from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.errors import NotFound
from src.application.use_cases.piglets import add_piglet, delete_piglet, update_piglet
from src.interfaces.http.deps import get_actor, get_uow
from src.interfaces.http.schemas.piglets import PigletCreate, PigletResponse, PigletUpdate

router = APIRouter(tags=["piglets"])


@router.post(
    "/births/{birth_id}/piglets",
    response_model=PigletResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_piglet_endpoint(
    birth_id: UUID,
    payload: PigletCreate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    piglet = await add_piglet.execute(
        uow, birth_id, add_piglet.AddPigletInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return piglet


@router.get("/piglets/{piglet_id}", response_model=PigletResponse)
async def get_piglet_endpoint(piglet_id: UUID, uow=Depends(get_uow)):
    piglet = await uow.piglets.get(piglet_id)
    if not piglet:
        raise NotFound("Piglet not found")
    return piglet


@router.patch("/piglets/{piglet_id}", response_model=PigletResponse)
async def update_piglet_endpoint(
    piglet_id: UUID,
    payload: PigletUpdate,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    piglet = await update_piglet.execute(
        uow, piglet_id, update_piglet.UpdatePigletInput(**payload.model_dump()), actor=actor
    )
    await uow.commit()
    return piglet


@router.delete("/piglets/{piglet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_piglet_endpoint(
    piglet_id: UUID,
    actor: str | None = Depends(get_actor),
    uow=Depends(get_uow),
):
    await delete_piglet.execute(uow, piglet_id, actor=actor)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
