from __future__ import annotations

from datetime import date, datetime, time, timezone

from zoneinfo import ZoneInfo

# Farm-local timezone; day-granular rules (windows, weaning dates) use it
DEFAULT_TIMEZONE_NAME = "America/Bogota"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)


def now_local(tz: ZoneInfo | None = None) -> datetime:
    return datetime.now(timezone.utc).astimezone(tz or DEFAULT_TZ)


def today_local(tz: ZoneInfo | None = None) -> date:
    """Current calendar date on the farm, not on the server."""
    return now_local(tz).date()


_DOW_ES = ["lun", "mar", "mié", "jue", "vie", "sáb", "dom"]
_MON_ES = ["ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sep", "oct", "nov", "dic"]


def format_day_date(
    d: date | datetime | str | None,
    *,
    include_time: bool = False,
    t: time | None = None,
    tz: ZoneInfo | None = DEFAULT_TZ,
) -> str:
    """Return 'vie 05/oct' or with time 'vie 05/oct hh:mm' (es-ES style).

    Accepts ISO date/datetime strings (with optional trailing 'Z').
    Plain dates are rendered as-is; datetimes are normalized to `tz`.
    """
    if d is None:
        return ""
    if isinstance(d, str):
        s = d.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            d = date.fromisoformat(s) if len(s) == 10 else datetime.fromisoformat(s)
        except ValueError:
            return s

    if isinstance(d, datetime):
        dt = d
    else:
        dt = datetime.combine(d, time(0, 0))
        tz = None

    if tz is not None:
        if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(tz)

    dow = _DOW_ES[dt.weekday()]
    mon = _MON_ES[dt.month - 1]
    day_str = f"{dt.day:02d}/{mon}"
    if include_time:
        hhmm = t.strftime("%H:%M") if t else dt.strftime("%H:%M")
        return f"{dow} {day_str} {hhmm}"
    return f"{dow} {day_str}"
