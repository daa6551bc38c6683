import math
from enum import Enum

from django.conf import settings

from .dates import local_now, parse_instant

URGENCY_WINDOW_DAYS = 7
MS_PER_DAY = 86_400_000

# Fields holding a due or expiry date, in display order.
DEADLINE_FIELDS = (
    ("next_service_due_date", "Next Service"),
    ("insurance_expiry_date", "Insurance"),
    ("pollution_expiry_date", "Pollution Certificate"),
)


class Urgency(str, Enum):
    URGENT = "urgent"
    OK = "ok"
    UNKNOWN = "unknown"


def days_until(due, now=None):
    """Whole days from ``now`` until ``due``, rounded up, or ``None``."""
    moment = parse_instant(due)
    if moment is None:
        return None
    now = now or local_now()
    diff_ms = (moment - now).total_seconds() * 1000
    return math.ceil(diff_ms / MS_PER_DAY)


def evaluate(due, now=None):
    days = days_until(due, now)
    if days is None:
        return Urgency.UNKNOWN
    return Urgency.URGENT if days < URGENCY_WINDOW_DAYS else Urgency.OK


def is_urgent(due, now=None, strict=None):
    """Unknown dates count as safe unless ``strict`` (or NAVEXA_FLAG_UNKNOWN_DATES) is set."""
    if strict is None:
        strict = getattr(settings, "NAVEXA_FLAG_UNKNOWN_DATES", False)
    urgency = evaluate(due, now)
    if urgency is Urgency.UNKNOWN:
        return strict
    return urgency is Urgency.URGENT


def vehicle_deadlines(vehicle, now=None, strict=None):
    now = now or local_now()
    report = []
    for name, label in DEADLINE_FIELDS:
        due = getattr(vehicle, name)
        report.append({
            "field": name,
            "label": label,
            "date": due,
            "urgency": evaluate(due, now).value,
            "urgent": is_urgent(due, now, strict),
        })
    return report
