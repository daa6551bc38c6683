import json
import logging
import os
from pathlib import Path

from django.conf import settings
from django.utils.module_loading import import_string

from .models import StoredCollection

logger = logging.getLogger(__name__)

TRIPS = "trips"
VEHICLES = "vehicles"


class CorruptCollection(ValueError):
    pass


def encode(records):
    return json.dumps(list(records))


def decode(name, payload):
    try:
        records = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise CorruptCollection(f"{name}: {exc}") from exc
    return check_records(name, records)


def check_records(name, records):
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise CorruptCollection(f"{name}: expected a list of objects")
    return records


class BaseStore:
    def load(self, name):
        raise NotImplementedError

    def save(self, name, records):
        raise NotImplementedError

    def exists(self, name):
        raise NotImplementedError


class MemoryStore(BaseStore):
    def __init__(self, payloads=None):
        self.payloads = dict(payloads or {})

    def load(self, name):
        if name not in self.payloads:
            return []
        try:
            return decode(name, self.payloads[name])
        except CorruptCollection:
            logger.warning("Discarding corrupt %s collection", name, exc_info=True)
            del self.payloads[name]
            return []

    def save(self, name, records):
        self.payloads[name] = encode(records)

    def exists(self, name):
        return name in self.payloads


class DatabaseStore(BaseStore):
    def load(self, name):
        try:
            row = StoredCollection.objects.get(name=name)
        except StoredCollection.DoesNotExist:
            return []
        try:
            return decode(name, row.payload)
        except CorruptCollection:
            logger.warning("Discarding corrupt %s collection", name, exc_info=True)
            row.delete()
            return []

    def save(self, name, records):
        StoredCollection.objects.update_or_create(name=name, defaults={"payload": encode(records)})

    def exists(self, name):
        return StoredCollection.objects.filter(name=name).exists()


class JsonFileStore(BaseStore):
    """All collections in one JSON document, ``{name: [records]}``."""

    def __init__(self, path=None):
        self.path = Path(path or settings.NAVEXA_STORE_PATH)

    def _read(self):
        if not self.path.exists():
            return {}
        with open(self.path) as f:
            text = f.read()
        try:
            document = json.loads(text)
        except ValueError:
            logger.warning("Discarding unreadable store file %s", self.path, exc_info=True)
            return {}
        if not isinstance(document, dict):
            logger.warning("Discarding store file %s: not a JSON object", self.path)
            return {}
        return document

    def _write(self, document):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w") as f:
            json.dump(document, f, indent=2)
        os.replace(tmp, self.path)

    def load(self, name):
        document = self._read()
        if name not in document:
            return []
        try:
            return check_records(name, document[name])
        except CorruptCollection:
            logger.warning("Discarding corrupt %s collection", name, exc_info=True)
            del document[name]
            self._write(document)
            return []

    def save(self, name, records):
        document = self._read()
        document[name] = list(records)
        self._write(document)

    def exists(self, name):
        return name in self._read()


def get_store():
    backend = import_string(settings.NAVEXA_STORE_BACKEND)
    return backend()
