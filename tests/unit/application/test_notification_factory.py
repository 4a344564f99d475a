from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.application.notifications.factory import build_notification
from src.application.notifications.types import NotificationType


@pytest.mark.parametrize(
    ("days", "priority"),
    [(0, "urgent"), (1, "urgent"), (3, "high"), (5, "normal")],
)
def test_farrowing_priority_follows_days_left(days, priority):
    built = build_notification(
        NotificationType.FARROWING_SOON,
        sow_id=uuid4(),
        ear_tag="S-10",
        days_until=days,
        expected_farrowing_date=date(2024, 5, 1),
    )

    assert built.priority == priority
    assert built.data["days_until"] == days
    assert built.data["expected_farrowing_date"] == "2024-05-01"


def test_sow_label_includes_alias_when_known():
    built = build_notification(
        NotificationType.HEAT_NOT_SERVICED, ear_tag="S-10", alias="Lola", days_since=1
    )

    assert "S-10 (Lola)" in built.message
    assert built.priority == "normal"


def test_old_unserviced_heat_is_high_priority():
    built = build_notification(NotificationType.HEAT_NOT_SERVICED, ear_tag="S-10", days_since=3)

    assert built.priority == "high"
    assert built.data["days_since"] == 3


def test_abortion_notification_is_high_priority():
    abortion_id = uuid4()
    built = build_notification(
        NotificationType.ABORTION_RECORDED,
        ear_tag="S-10",
        abortion_id=abortion_id,
        abortion_date=date(2024, 2, 1),
        recovery_until=date(2024, 2, 15),
    )

    assert built.priority == "high"
    assert built.data["abortion_id"] == str(abortion_id)


def test_unknown_type_passes_through():
    built = build_notification("custom", title="Hola", message="Mundo", data={"x": 1})

    assert (built.title, built.message, built.data) == ("Hola", "Mundo", {"x": 1})
