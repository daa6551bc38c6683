import logging

from . import aggregation
from .records import Trip, Vehicle, default_vehicle
from .store import TRIPS, VEHICLES

logger = logging.getLogger(__name__)

UNKNOWN_VEHICLE = "Unknown vehicle"


class TripNotFound(LookupError):
    pass


class VehicleNotFound(LookupError):
    pass


class FleetLedger:
    def __init__(self, store, trips=None, vehicles=None):
        self.store = store
        self.trips = list(trips or [])
        self.vehicles = list(vehicles or [])

    @classmethod
    def open(cls, store):
        trips = [Trip.from_dict(r) for r in store.load(TRIPS)]
        vehicles = [Vehicle.from_dict(r) for r in store.load(VEHICLES)]
        ledger = cls(store, trips, vehicles)
        if not vehicles and not store.exists(VEHICLES):
            ledger.vehicles = [default_vehicle()]
            ledger._save_vehicles()
            logger.info("Seeded default vehicle %s", ledger.vehicles[0].registration_number)
        return ledger

    def _save_trips(self):
        self.store.save(TRIPS, [t.to_dict() for t in self.trips])

    def _save_vehicles(self):
        self.store.save(VEHICLES, [v.to_dict() for v in self.vehicles])

    # Trips

    def get_trip(self, trip_id):
        for trip in self.trips:
            if trip.id == trip_id:
                return trip
        raise TripNotFound(trip_id)

    def record_trip(self, data, trip_id=None):
        if trip_id is None:
            trip = Trip.from_dict({k: v for k, v in data.items() if k != "id"})
            self.trips.append(trip)
            logger.info("Recorded trip %s (%s)", trip.id, trip.date)
        else:
            for index, existing in enumerate(self.trips):
                if existing.id == trip_id:
                    break
            else:
                raise TripNotFound(trip_id)
            trip = Trip.from_dict(data, trip_id=trip_id)
            self.trips[index] = trip
            logger.info("Updated trip %s", trip.id)
        self._save_trips()
        return trip

    # Vehicles

    def get_vehicle(self, vehicle_id):
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        raise VehicleNotFound(vehicle_id)

    def vehicle_for(self, trip):
        try:
            return self.get_vehicle(trip.vehicle_id)
        except VehicleNotFound:
            return None

    def vehicle_label(self, trip):
        vehicle = self.vehicle_for(trip)
        return vehicle.label if vehicle else UNKNOWN_VEHICLE

    def add_vehicle(self, data):
        if not data.get("registration_number") or not data.get("make_model"):
            raise ValueError("registration_number and make_model are required")
        vehicle = Vehicle.from_dict({k: v for k, v in data.items() if k != "id"})
        self.vehicles.append(vehicle)
        self._save_vehicles()
        logger.info("Added vehicle %s (%s)", vehicle.registration_number, vehicle.id)
        return vehicle

    def delete_vehicle(self, vehicle_id):
        vehicle = self.get_vehicle(vehicle_id)
        self.vehicles = [v for v in self.vehicles if v.id != vehicle_id]
        self._save_vehicles()
        logger.info("Deleted vehicle %s", vehicle_id)
        return vehicle

    def summary(self, today=None):
        return aggregation.summarize(self.trips, today)
