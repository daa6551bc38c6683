from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from .forms import TripForm, VehicleForm
from .insight import request_insight
from .ledger import FleetLedger, TripNotFound, VehicleNotFound
from .maintenance import vehicle_deadlines
from .store import get_store


def open_ledger():
    return FleetLedger.open(get_store())


def trip_row(ledger, trip):
    row = trip.to_dict()
    row["vehicle"] = ledger.vehicle_label(trip)
    return row


def vehicle_row(vehicle):
    row = vehicle.to_dict()
    row["deadlines"] = vehicle_deadlines(vehicle)
    return row


# --- Dashboard ---
@ensure_csrf_cookie
@require_GET
def dashboard(request):
    ledger = open_ledger()
    summary = ledger.summary()
    return JsonResponse({
        "monthly_income": summary.monthly_income,
        "monthly_expense": summary.monthly_expense,
        "monthly_net_profit": summary.monthly_net_profit,
        "pending_driver_payable": summary.pending_driver_payable,
        "recent_activity": summary.recent_activity,
        "recent_trips": [trip_row(ledger, t) for t in summary.recent_trips],
        "trip_count": len(ledger.trips),
        "vehicle_count": len(ledger.vehicles),
    })


# --- Trips ---
@require_http_methods(["GET", "POST"])
def trip_list(request):
    ledger = open_ledger()
    if request.method == 'POST':
        form = TripForm(request.POST)
        if not form.is_valid():
            return JsonResponse({'errors': form.errors.get_json_data()}, status=400)
        trip = ledger.record_trip(form.to_record_data())
        return JsonResponse(trip_row(ledger, trip), status=201)
    return JsonResponse({'trips': [trip_row(ledger, t) for t in ledger.trips]})


@require_http_methods(["GET", "POST"])
def trip_detail(request, trip_id):
    ledger = open_ledger()
    try:
        trip = ledger.get_trip(trip_id)
    except TripNotFound:
        return HttpResponse('Trip not found', status=404)
    if request.method == 'POST':
        form = TripForm(request.POST)
        if not form.is_valid():
            return JsonResponse({'errors': form.errors.get_json_data()}, status=400)
        trip = ledger.record_trip(form.to_record_data(), trip_id=trip.id)
    return JsonResponse(trip_row(ledger, trip))


# --- Vehicles ---
@require_http_methods(["GET", "POST"])
def vehicle_list(request):
    ledger = open_ledger()
    if request.method == 'POST':
        form = VehicleForm(request.POST)
        if not form.is_valid():
            return JsonResponse({'errors': form.errors.get_json_data()}, status=400)
        vehicle = ledger.add_vehicle(form.cleaned_data)
        return JsonResponse(vehicle_row(vehicle), status=201)
    return JsonResponse({'vehicles': [vehicle_row(v) for v in ledger.vehicles]})


@require_POST
def vehicle_delete(request, vehicle_id):
    ledger = open_ledger()
    try:
        ledger.delete_vehicle(vehicle_id)
    except VehicleNotFound:
        return HttpResponse('Vehicle not found', status=404)
    return JsonResponse({'deleted': vehicle_id})


# --- Insight ---
@require_GET
def insight(request):
    ledger = open_ledger()
    return JsonResponse({'insight': request_insight(ledger.trips, ledger.vehicles)})


@require_GET
def download_summary(request):
    ledger = open_ledger()
    report = request_insight(ledger.trips, ledger.vehicles) or "No data"
    resp = HttpResponse(report, content_type='text/plain')
    resp['Content-Disposition'] = 'attachment; filename=Fleet_Summary.txt'
    return resp
