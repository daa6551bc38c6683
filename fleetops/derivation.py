from typing import NamedTuple

from django.db import models


class PaymentStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    PAID = "Paid", "Paid"


class Derivation(NamedTuple):
    total_expense: float
    net_profit: float
    total_distance: float
    balance_payable: float
    payment_status: PaymentStatus


def balance_payable(total_driver_pay, advance_paid):
    # Negative means the driver was overpaid; not clamped.
    return total_driver_pay - advance_paid


def payment_status(balance):
    return PaymentStatus.PAID if balance <= 0 else PaymentStatus.PENDING


def total_expense(expenses, total_driver_pay):
    # fuel_quantity is informational and stays out of the total.
    return (
        expenses.fuel_cost
        + expenses.toll_charges
        + expenses.parking_charges
        + expenses.other_expenses
        + total_driver_pay
    )


def derive(trip) -> Derivation:
    pay = trip.driver_payment
    expense = total_expense(trip.expenses, pay.total_driver_pay)
    balance = balance_payable(pay.total_driver_pay, pay.advance_paid)
    return Derivation(
        total_expense=expense,
        net_profit=trip.total_amount - expense,
        total_distance=trip.end_odometer - trip.start_odometer,
        balance_payable=balance,
        payment_status=payment_status(balance),
    )
