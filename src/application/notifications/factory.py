from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.models.notification import NotificationPriority
from src.utils.datetime_tz import format_day_date

from .types import NotificationType


@dataclass
class BuiltNotification:
    type: str
    title: str
    message: str
    data: dict[str, Any]
    priority: str = NotificationPriority.NORMAL.value


def _sow_label(kwargs: dict[str, Any]) -> str:
    """Prefer 'TAG (alias)' and fall back to the tag alone."""
    tag = kwargs.get("ear_tag") or "?"
    alias = kwargs.get("alias")
    return f"{tag} ({alias})" if alias else str(tag)


def _str_or_none(value: Any) -> str | None:
    return str(value) if value is not None else None


def build_notification(ntype: str, **kwargs: Any) -> BuiltNotification:
    """
    Central place to build notification title/message/data from templates.
    Keep strings easy to find and translate.
    """
    sow = _sow_label(kwargs)
    sow_id = _str_or_none(kwargs.get("sow_id"))

    if ntype == NotificationType.FARROWING_SOON:
        days: int = int(kwargs.get("days_until", 0) or 0)
        if days <= 0:
            title = "🚨 Parto inminente"
            message = f"La cerda {sow} puede parir hoy. Preparar jaula de maternidad."
            priority = NotificationPriority.URGENT.value
        elif days <= 1:
            title = "🚨 Parto inminente"
            message = f"La cerda {sow} puede parir mañana. Preparar jaula de maternidad."
            priority = NotificationPriority.URGENT.value
        elif days <= 3:
            title = "⚠️ Parto próximo"
            message = f"La cerda {sow} puede parir en {days} días. Revisar preparativos."
            priority = NotificationPriority.HIGH.value
        else:
            title = "📋 Parto programado"
            message = f"La cerda {sow} tiene parto previsto en {days} días."
            priority = NotificationPriority.NORMAL.value
        data = {
            "sow_id": sow_id,
            "pregnancy_id": _str_or_none(kwargs.get("pregnancy_id")),
            "expected_farrowing_date": _str_or_none(kwargs.get("expected_farrowing_date")),
            "days_until": days,
        }
        return BuiltNotification(ntype, title, message, data, priority)

    if ntype == NotificationType.HEAT_NOT_SERVICED:
        days = int(kwargs.get("days_since", 0) or 0)
        title = "⚠️ Celo sin servicio"
        message = f"La cerda {sow} está en celo desde hace {days} días y no ha sido servida."
        priority = (
            NotificationPriority.HIGH.value if days >= 3 else NotificationPriority.NORMAL.value
        )
        data = {
            "sow_id": sow_id,
            "heat_id": _str_or_none(kwargs.get("heat_id")),
            "heat_date": _str_or_none(kwargs.get("heat_date")),
            "days_since": days,
        }
        return BuiltNotification(ntype, title, message, data, priority)

    if ntype == NotificationType.PREGNANCY_CONFIRMATION_DUE:
        days = int(kwargs.get("days_since", 0) or 0)
        title = "🔍 Confirmar gestación"
        message = (
            f"La cerda {sow} debe ser examinada para confirmar gestación "
            f"({days} días desde la concepción)."
        )
        data = {
            "sow_id": sow_id,
            "pregnancy_id": _str_or_none(kwargs.get("pregnancy_id")),
            "days_since": days,
        }
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.PREGNANCY_CONFIRMED:
        d = kwargs.get("expected_farrowing_date")
        title = f"🐷 Gestación confirmada: {sow}"
        message = f"Parto previsto {format_day_date(d)}"
        data = {
            "sow_id": sow_id,
            "pregnancy_id": _str_or_none(kwargs.get("pregnancy_id")),
            "expected_farrowing_date": _str_or_none(d),
        }
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.BIRTH_RECORDED:
        born_alive = int(kwargs.get("born_alive", 0) or 0)
        total_born = int(kwargs.get("total_born", 0) or 0)
        d = kwargs.get("birth_date")
        title = f"🐖 Parto registrado: {sow}"
        message = f"{born_alive} vivos de {total_born} nacidos - {format_day_date(d)}"
        data = {
            "sow_id": sow_id,
            "birth_id": _str_or_none(kwargs.get("birth_id")),
            "born_alive": born_alive,
            "total_born": total_born,
            "birth_date": _str_or_none(d),
        }
        return BuiltNotification(ntype, title, message, data)

    if ntype == NotificationType.ABORTION_RECORDED:
        d = kwargs.get("abortion_date")
        title = f"⚠️ Aborto registrado: {sow}"
        message = f"Recuperación hasta {format_day_date(kwargs.get('recovery_until'))}"
        data = {
            "sow_id": sow_id,
            "abortion_id": _str_or_none(kwargs.get("abortion_id")),
            "abortion_date": _str_or_none(d),
        }
        return BuiltNotification(ntype, title, message, data, NotificationPriority.HIGH.value)

    if ntype == NotificationType.LITTER_WEANED:
        count = int(kwargs.get("piglets_weaned", 0) or 0)
        d = kwargs.get("weaning_date")
        title = f"✅ Camada destetada: {sow}"
        message = f"{count} lechones destetados - {format_day_date(d)}"
        data = {
            "sow_id": sow_id,
            "birth_id": _str_or_none(kwargs.get("birth_id")),
            "piglets_weaned": count,
            "weaning_date": _str_or_none(d),
        }
        return BuiltNotification(ntype, title, message, data)

    # Fallback to pass-through
    return BuiltNotification(
        ntype,
        title=str(kwargs.get("title", "Notificación")),
        message=str(kwargs.get("message", "")),
        data=dict(kwargs.get("data", {})),
    )
