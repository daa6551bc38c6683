import logging

import pandas as pd
from django.conf import settings
from django.utils.module_loading import import_string

from .aggregation import pending_driver_payable
from .ledger import UNKNOWN_VEHICLE
from .maintenance import DEADLINE_FIELDS, is_urgent

logger = logging.getLogger(__name__)


class InsightGenerator:
    def generate(self, trips, vehicles):
        raise NotImplementedError


class ReportInsightGenerator(InsightGenerator):
    def generate(self, trips, vehicles):
        if not trips:
            return "No trips recorded yet."
        labels = {v.id: v.registration_number for v in vehicles}
        df = pd.DataFrame([
            {
                "vehicle": labels.get(t.vehicle_id, UNKNOWN_VEHICLE),
                "route": f"{t.pickup_location} -> {t.drop_location}",
                "income": t.total_amount,
                "expense": t.total_expense,
                "profit": t.net_profit,
                "km": t.total_distance,
            }
            for t in trips
        ])
        rev = df["income"].sum()
        exp = df["expense"].sum()
        profit = df["profit"].sum()
        kms = df["km"].sum()
        profit_pct = round(profit / rev * 100, 1) if rev else 0
        per_km = round(profit / kms, 2) if kms else 0
        avg_profit = round(profit / len(df), 2)
        top_vehicle = df.groupby("vehicle")["profit"].sum().idxmax()
        top_routes = ", ".join(df["route"].value_counts().head(2).index)
        pending = pending_driver_payable(trips)

        flagged = [
            f"{v.registration_number} ({label})"
            for v in vehicles
            for name, label in DEADLINE_FIELDS
            if is_urgent(getattr(v, name))
        ]
        return f"""Fleet Highlights

Total Trips: {len(df)}
Profit Percentage: {profit_pct}%

Financials:
- Income: ${rev:,.2f}
- Expense: ${exp:,.2f}
- Profit: ${profit:,.2f}
- Distance: {kms:,.0f} km
- Profit per km: ${per_km}
- Pending Driver Pay: ${pending:,.2f}

Insights:
- Top Vehicle: {top_vehicle}
- Average Profit per Trip: ${avg_profit}
- Top Routes: {top_routes}
- Deadlines Due: {", ".join(flagged) if flagged else "none"}
"""


def get_generator():
    return import_string(settings.NAVEXA_INSIGHT_GENERATOR)()


def request_insight(trips, vehicles, generator=None):
    """Ask the generator for a summary; returns ``""`` if it fails."""
    try:
        generator = generator or get_generator()
        return generator.generate(trips, vehicles) or ""
    except Exception:
        logger.exception("Insight generation failed")
        return ""
