from __future__ import annotations


class NotificationType:
    """Canonical notification type names used across backend/frontend."""

    FARROWING_SOON = "farrowing_soon"
    HEAT_NOT_SERVICED = "heat_not_serviced"
    PREGNANCY_CONFIRMATION_DUE = "pregnancy_confirmation_due"
    PREGNANCY_CONFIRMED = "pregnancy_confirmed"
    BIRTH_RECORDED = "birth_recorded"
    ABORTION_RECORDED = "abortion_recorded"
    LITTER_WEANED = "litter_weaned"


ALL_TYPES = {
    NotificationType.FARROWING_SOON,
    NotificationType.HEAT_NOT_SERVICED,
    NotificationType.PREGNANCY_CONFIRMATION_DUE,
    NotificationType.PREGNANCY_CONFIRMED,
    NotificationType.BIRTH_RECORDED,
    NotificationType.ABORTION_RECORDED,
    NotificationType.LITTER_WEANED,
}
