from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.abortion import Abortion
from src.domain.models.birth import Birth
from src.domain.models.heat import Heat
from src.domain.models.piglet import Piglet
from src.domain.models.pregnancy import Pregnancy
from src.domain.models.service import Service
from src.domain.models.sow import Sow


@dataclass(slots=True)
class SowHistory:
    """Snapshot of every reproductive record of one sow.

    Loaded fresh for each validation or refresh; never cached across requests.
    """

    sow: Sow
    heats: list[Heat] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    pregnancies: list[Pregnancy] = field(default_factory=list)
    births: list[Birth] = field(default_factory=list)
    abortions: list[Abortion] = field(default_factory=list)
    piglets: list[Piglet] = field(default_factory=list)

    def latest_birth(self, on_or_before: date | None = None) -> Birth | None:
        births = [b for b in self.births if on_or_before is None or b.birth_date <= on_or_before]
        if not births:
            return None
        return max(births, key=lambda b: (b.birth_date, b.created_at))

    def latest_abortion(self, on_or_before: date | None = None) -> Abortion | None:
        abortions = [
            a for a in self.abortions if on_or_before is None or a.abortion_date <= on_or_before
        ]
        if not abortions:
            return None
        return max(abortions, key=lambda a: (a.abortion_date, a.created_at))

    def latest_heat(
        self,
        statuses: set[str] | frozenset[str] | None = None,
        on_or_before: date | None = None,
    ) -> Heat | None:
        heats = [
            h
            for h in self.heats
            if (statuses is None or h.status in statuses)
            and (on_or_before is None or h.heat_date <= on_or_before)
        ]
        if not heats:
            return None
        return max(heats, key=lambda h: (h.heat_date, h.created_at))

    def in_progress_pregnancies(self) -> list[Pregnancy]:
        return [p for p in self.pregnancies if p.is_in_progress]

    def confirmed_in_progress(self) -> Pregnancy | None:
        confirmed = [p for p in self.in_progress_pregnancies() if p.confirmed]
        if not confirmed:
            return None
        return max(confirmed, key=lambda p: (p.conception_date, p.created_at))

    def services_for_heat(self, heat_id) -> list[Service]:
        return sorted(
            (s for s in self.services if s.heat_id == heat_id),
            key=lambda s: (s.service_date, s.created_at),
        )

    def litter_of(self, birth: Birth) -> list[Piglet]:
        return [p for p in self.piglets if p.birth_id == birth.id]
