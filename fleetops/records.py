import uuid
from dataclasses import asdict, dataclass, field, fields

from django.db import models

from .derivation import PaymentStatus, balance_payable, derive, payment_status


class PaymentMode(models.TextChoices):
    CASH = "Cash", "Cash"
    UPI = "UPI", "UPI"
    BANK_TRANSFER = "Bank Transfer", "Bank Transfer"
    CARD = "Card", "Card"


def new_record_id():
    return uuid.uuid4().hex


def to_number(value):
    """Coerce a raw numeric input; anything missing or unreadable is zero."""
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def to_text(value):
    return "" if value is None else str(value)


def _raw_fields(cls):
    return [f.name for f in fields(cls) if f.init]


@dataclass(frozen=True)
class Expenses:
    fuel_cost: float = 0.0
    fuel_quantity: float = 0.0
    toll_charges: float = 0.0
    parking_charges: float = 0.0
    other_expenses: float = 0.0

    @classmethod
    def from_dict(cls, data):
        data = data if isinstance(data, dict) else {}
        return cls(**{name: to_number(data.get(name)) for name in _raw_fields(cls)})


@dataclass(frozen=True)
class DriverPayment:
    total_driver_pay: float = 0.0
    advance_paid: float = 0.0
    payment_mode: PaymentMode = PaymentMode.CASH
    balance_payable: float = field(init=False)
    payment_status: PaymentStatus = field(init=False)

    def __post_init__(self):
        balance = balance_payable(self.total_driver_pay, self.advance_paid)
        object.__setattr__(self, "balance_payable", balance)
        object.__setattr__(self, "payment_status", payment_status(balance))

    @classmethod
    def from_dict(cls, data):
        data = data if isinstance(data, dict) else {}
        mode = data.get("payment_mode") or PaymentMode.CASH
        if mode not in PaymentMode.values:
            mode = PaymentMode.CASH
        return cls(
            total_driver_pay=to_number(data.get("total_driver_pay")),
            advance_paid=to_number(data.get("advance_paid")),
            payment_mode=PaymentMode(mode),
        )


TRIP_TEXT_FIELDS = (
    "date", "vehicle_id", "driver_name", "driver_contact", "customer_name",
    "customer_contact", "pickup_location", "drop_location", "start_time",
    "end_time", "notes",
)
TRIP_NUMBER_FIELDS = ("total_amount", "start_odometer", "end_odometer")


@dataclass(frozen=True)
class Trip:
    id: str
    date: str = ""
    vehicle_id: str = ""
    driver_name: str = ""
    driver_contact: str = ""
    customer_name: str = ""
    customer_contact: str = ""
    pickup_location: str = ""
    drop_location: str = ""
    start_time: str = ""
    end_time: str = ""
    total_amount: float = 0.0
    start_odometer: float = 0.0
    end_odometer: float = 0.0
    notes: str = ""
    expenses: Expenses = field(default_factory=Expenses)
    driver_payment: DriverPayment = field(default_factory=DriverPayment)
    total_expense: float = field(init=False)
    net_profit: float = field(init=False)
    total_distance: float = field(init=False)

    def __post_init__(self):
        figures = derive(self)
        object.__setattr__(self, "total_expense", figures.total_expense)
        object.__setattr__(self, "net_profit", figures.net_profit)
        object.__setattr__(self, "total_distance", figures.total_distance)

    @property
    def payment_status(self):
        return self.driver_payment.payment_status

    @property
    def balance_payable(self):
        return self.driver_payment.balance_payable

    @classmethod
    def from_dict(cls, data, trip_id=None):
        values = {name: to_text(data.get(name)) for name in TRIP_TEXT_FIELDS}
        values.update({name: to_number(data.get(name)) for name in TRIP_NUMBER_FIELDS})
        return cls(
            id=trip_id or to_text(data.get("id")) or new_record_id(),
            expenses=Expenses.from_dict(data.get("expenses")),
            driver_payment=DriverPayment.from_dict(data.get("driver_payment")),
            **values,
        )

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Vehicle:
    id: str
    registration_number: str = ""
    make_model: str = ""
    last_service_date: str = ""
    next_service_due_date: str = ""
    oil_change_date: str = ""
    tyre_change_date: str = ""
    brake_service_date: str = ""
    battery_replacement_date: str = ""
    insurance_expiry_date: str = ""
    pollution_expiry_date: str = ""

    @property
    def label(self):
        return f"{self.registration_number} ({self.make_model})"

    @classmethod
    def from_dict(cls, data, vehicle_id=None):
        values = {name: to_text(data.get(name)) for name in _raw_fields(cls) if name != "id"}
        return cls(id=vehicle_id or to_text(data.get("id")) or new_record_id(), **values)

    def to_dict(self):
        return asdict(self)


def default_vehicle():
    return Vehicle(
        id="v1",
        registration_number="AB-123-CD",
        make_model="Toyota Sienna 2022",
        last_service_date="2023-10-01",
        next_service_due_date="2024-04-01",
        oil_change_date="2023-10-01",
        insurance_expiry_date="2024-08-15",
    )
