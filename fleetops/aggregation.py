"""Dashboard figures, recomputed from the full trip collection on every call."""
from dataclasses import dataclass, field

import pandas as pd

from .dates import human_label, local_now, parse_day
from .derivation import PaymentStatus

RECENT_SERIES_SIZE = 7
RECENT_TRIPS_SIZE = 5

COLUMNS = [
    "position", "when", "total_amount", "total_expense", "net_profit",
    "balance_payable", "payment_status",
]


@dataclass
class DashboardSummary:
    monthly_income: float = 0.0
    monthly_expense: float = 0.0
    monthly_net_profit: float = 0.0
    pending_driver_payable: float = 0.0
    recent_activity: list = field(default_factory=list)
    recent_trips: list = field(default_factory=list)


def _timestamp(value):
    day = parse_day(value)
    return pd.Timestamp(day) if day else pd.NaT


def trips_frame(trips):
    rows = [
        {
            "position": i,
            "when": _timestamp(t.date),
            "total_amount": t.total_amount,
            "total_expense": t.total_expense,
            "net_profit": t.net_profit,
            "balance_payable": t.balance_payable,
            "payment_status": str(t.payment_status),
        }
        for i, t in enumerate(trips)
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["when"] = pd.to_datetime(df["when"])
    return df


def monthly_totals(trips, today=None):
    today = today or local_now().date()
    df = trips_frame(trips)
    when = df["when"].dt
    month = df[(when.year == today.year) & (when.month == today.month)]
    income = float(month["total_amount"].sum())
    expense = float(month["total_expense"].sum())
    return income, expense, income - expense


def pending_driver_payable(trips):
    df = trips_frame(trips)
    pending = df[df["payment_status"] == str(PaymentStatus.PENDING)]
    return float(pending["balance_payable"].sum())


def newest_first(trips):
    """Stable, so same-day trips keep their stored order; undated trips go last."""
    df = trips_frame(trips)
    ordered = df.sort_values("when", ascending=False, kind="stable", na_position="last")
    return [trips[i] for i in ordered["position"]]


def recent_activity(trips, size=RECENT_SERIES_SIZE):
    window = newest_first(trips)[:size]
    return [
        {
            "label": human_label(t.date),
            "income": t.total_amount,
            "expense": t.total_expense,
            "profit": t.net_profit,
        }
        for t in reversed(window)
    ]


def recent_trips(trips, size=RECENT_TRIPS_SIZE):
    return newest_first(trips)[:size]


def summarize(trips, today=None):
    income, expense, profit = monthly_totals(trips, today)
    return DashboardSummary(
        monthly_income=income,
        monthly_expense=expense,
        monthly_net_profit=profit,
        pending_driver_payable=pending_driver_payable(trips),
        recent_activity=recent_activity(trips),
        recent_trips=recent_trips(trips),
    )
