from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import require_sow_history
from src.domain.models.abortion import Abortion
from src.domain.models.birth import Birth
from src.domain.models.heat import Heat, HeatStatus
from src.domain.models.pregnancy import Pregnancy
from src.domain.models.service import Service
from src.domain.models.sow import Sow
from src.domain.services.sow_projection import derive_reproductive_status


@dataclass(slots=True)
class ReproductiveStatusView:
    sow: Sow
    derived_status: str
    last_heat: Heat | None
    last_service: Service | None
    active_pregnancy: Pregnancy | None
    last_birth: Birth | None
    last_abortion: Abortion | None
    nursing_piglets: int

    @property
    def in_sync(self) -> bool:
        return self.derived_status == self.sow.reproductive_status


async def execute(uow: UnitOfWork, sow_id: UUID) -> ReproductiveStatusView:
    history = await require_sow_history(uow, sow_id)
    last_heat = history.latest_heat(
        {s.value for s in HeatStatus if s is not HeatStatus.CANCELLED}
    )
    last_service = max(
        history.services, key=lambda s: (s.service_date, s.created_at), default=None
    )
    in_progress = history.in_progress_pregnancies()
    last_birth = history.latest_birth()
    return ReproductiveStatusView(
        sow=history.sow,
        derived_status=derive_reproductive_status(history),
        last_heat=last_heat,
        last_service=last_service,
        active_pregnancy=in_progress[0] if in_progress else None,
        last_birth=last_birth,
        last_abortion=history.latest_abortion(),
        nursing_piglets=(
            sum(1 for p in history.litter_of(last_birth) if p.is_nursing) if last_birth else 0
        ),
    )
