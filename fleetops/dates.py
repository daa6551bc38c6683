import pandas as pd
from django.utils import timezone


def local_now():
    now = timezone.now()
    if timezone.is_aware(now):
        now = timezone.localtime(now).replace(tzinfo=None)
    return now


def parse_instant(value):
    """Naive local datetime for a free-form date string, or ``None``."""
    if not value or not isinstance(value, str):
        return None
    ts = pd.to_datetime(value.strip(), errors="coerce")
    # NaT covers junk, impossible days and out-of-range years
    if pd.isna(ts):
        return None
    moment = ts.to_pydatetime()
    if timezone.is_aware(moment):
        moment = timezone.localtime(moment).replace(tzinfo=None)
    return moment


def parse_day(value):
    moment = parse_instant(value)
    return moment.date() if moment else None


def human_label(value):
    day = parse_day(value)
    if day is None:
        return value or ""
    return f"{day:%b} {day.day}"
