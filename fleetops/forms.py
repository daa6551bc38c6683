from django import forms

from .records import PaymentMode

EXPENSE_FIELDS = ("fuel_cost", "fuel_quantity", "toll_charges", "parking_charges", "other_expenses")
DRIVER_PAY_FIELDS = ("total_driver_pay", "advance_paid", "payment_mode")


class TripForm(forms.Form):
    """Raw trip input. Derived figures are not accepted from the form."""
    date = forms.CharField(max_length=50)
    vehicle_id = forms.CharField(max_length=100)
    driver_name = forms.CharField(max_length=100, required=False)
    driver_contact = forms.CharField(max_length=50, required=False)
    customer_name = forms.CharField(max_length=100, required=False)
    customer_contact = forms.CharField(max_length=50, required=False)
    pickup_location = forms.CharField(max_length=200, required=False)
    drop_location = forms.CharField(max_length=200, required=False)
    start_time = forms.CharField(max_length=20, required=False)
    end_time = forms.CharField(max_length=20, required=False)
    total_amount = forms.FloatField(required=False)
    start_odometer = forms.FloatField(required=False)
    end_odometer = forms.FloatField(required=False)
    notes = forms.CharField(required=False)

    fuel_cost = forms.FloatField(required=False)
    fuel_quantity = forms.FloatField(required=False)
    toll_charges = forms.FloatField(required=False)
    parking_charges = forms.FloatField(required=False)
    other_expenses = forms.FloatField(required=False)

    total_driver_pay = forms.FloatField(required=False)
    advance_paid = forms.FloatField(required=False)
    payment_mode = forms.ChoiceField(choices=PaymentMode.choices, required=False)

    def to_record_data(self):
        """Nest the flat form values the way ``Trip.from_dict`` expects them."""
        data = dict(self.cleaned_data)
        data["expenses"] = {name: data.pop(name) for name in EXPENSE_FIELDS}
        data["driver_payment"] = {name: data.pop(name) for name in DRIVER_PAY_FIELDS}
        return data


class VehicleForm(forms.Form):
    registration_number = forms.CharField(max_length=50)
    make_model = forms.CharField(max_length=100)
    last_service_date = forms.CharField(max_length=50, required=False)
    next_service_due_date = forms.CharField(max_length=50, required=False)
    oil_change_date = forms.CharField(max_length=50, required=False)
    tyre_change_date = forms.CharField(max_length=50, required=False)
    brake_service_date = forms.CharField(max_length=50, required=False)
    battery_replacement_date = forms.CharField(max_length=50, required=False)
    insurance_expiry_date = forms.CharField(max_length=50, required=False)
    pollution_expiry_date = forms.CharField(max_length=50, required=False)
