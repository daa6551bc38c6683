import dataclasses

import pytest

from fleetops.derivation import PaymentStatus, derive
from fleetops.records import DriverPayment, Expenses, PaymentMode, Trip

from .factories import make_trip, trip_data


def test_settled_trip():
    trip = make_trip()
    assert trip.total_expense == 170
    assert trip.net_profit == 330
    assert trip.total_distance == 120
    assert trip.driver_payment.balance_payable == 0
    assert trip.driver_payment.payment_status == PaymentStatus.PAID


def test_partly_advanced_trip_is_pending():
    trip = make_trip(advance_paid=40)
    assert trip.balance_payable == 60
    assert trip.payment_status == PaymentStatus.PENDING


@pytest.mark.parametrize("fuel,toll,parking,other,pay", [
    (0, 0, 0, 0, 0),
    (12.5, 3.25, 0, 7, 80),
    (-20, 10, 5, 0, 100),
    (1e6, 2e5, 3e4, 4e3, 5e2),
])
def test_total_expense_includes_driver_pay(fuel, toll, parking, other, pay):
    trip = make_trip(fuel_cost=fuel, toll_charges=toll, parking_charges=parking,
                     other_expenses=other, total_driver_pay=pay)
    assert trip.total_expense == fuel + toll + parking + other + pay
    assert trip.net_profit == trip.total_amount - trip.total_expense


def test_fuel_quantity_does_not_count_as_expense():
    assert make_trip(fuel_quantity=0).total_expense == make_trip(fuel_quantity=999).total_expense


def test_loss_making_trip_keeps_negative_profit():
    trip = make_trip(total_amount=100)
    assert trip.net_profit == -70


def test_odometer_running_backwards_gives_negative_distance():
    trip = make_trip(start_odometer=1500, end_odometer=1400)
    assert trip.total_distance == -100


@pytest.mark.parametrize("pay,advance,status", [
    (100, 100, PaymentStatus.PAID),
    (100, 150, PaymentStatus.PAID),
    (100, 99.99, PaymentStatus.PENDING),
    (0, 0, PaymentStatus.PAID),
])
def test_payment_status_threshold(pay, advance, status):
    trip = make_trip(total_driver_pay=pay, advance_paid=advance)
    assert trip.balance_payable == pay - advance
    assert trip.payment_status == status


def test_overpayment_is_not_clamped():
    assert make_trip(total_driver_pay=100, advance_paid=150).balance_payable == -50


def test_missing_numbers_count_as_zero():
    trip = Trip.from_dict({"date": "2026-10-01", "total_amount": "", "end_odometer": None})
    assert trip.total_expense == 0
    assert trip.net_profit == 0
    assert trip.total_distance == 0
    assert trip.payment_status == PaymentStatus.PAID
    assert trip.driver_payment.payment_mode == PaymentMode.CASH


def test_unreadable_numbers_count_as_zero():
    trip = Trip.from_dict({"total_amount": "lots", "expenses": {"fuel_cost": [1]}})
    assert trip.total_amount == 0
    assert trip.expenses.fuel_cost == 0


def test_derived_fields_cannot_be_passed_in():
    with pytest.raises(TypeError):
        Trip(id="t1", total_amount=10, net_profit=99)
    with pytest.raises(TypeError):
        DriverPayment(total_driver_pay=10, payment_status=PaymentStatus.PAID)


def test_derived_fields_cannot_be_assigned():
    trip = make_trip()
    with pytest.raises(dataclasses.FrozenInstanceError):
        trip.net_profit = 0


def test_stored_derived_values_are_recomputed():
    data = trip_data()
    data.update(total_expense=1, net_profit=2, total_distance=3)
    data["driver_payment"].update(balance_payable=-9, payment_status="Pending")
    trip = Trip.from_dict(data)
    assert (trip.total_expense, trip.net_profit, trip.total_distance) == (170, 330, 120)
    assert trip.payment_status == PaymentStatus.PAID


def test_edit_recomputes_from_new_inputs():
    trip = make_trip()
    edited = dataclasses.replace(trip, total_amount=900)
    assert edited.id == trip.id
    assert edited.net_profit == 730


def test_derive_works_on_any_raw_shape():
    class Raw:
        total_amount = 500
        start_odometer = 1000
        end_odometer = 1120
        expenses = Expenses(fuel_cost=50, toll_charges=10, parking_charges=5, other_expenses=5)
        driver_payment = DriverPayment(total_driver_pay=100, advance_paid=40)

    figures = derive(Raw())
    assert figures.total_expense == 170
    assert figures.net_profit == 330
    assert figures.total_distance == 120
    assert figures.balance_payable == 60
    assert figures.payment_status == PaymentStatus.PENDING


def test_new_trips_get_distinct_ids():
    first = Trip.from_dict(trip_data())
    second = Trip.from_dict(trip_data())
    assert first.id and second.id and first.id != second.id


def test_unknown_payment_mode_falls_back_to_cash():
    trip = make_trip(payment_mode="Cheque")
    assert trip.driver_payment.payment_mode == PaymentMode.CASH
