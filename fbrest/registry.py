"""
Device registry fed by documents polled from the store.

The store holds one object per device under a common path, keyed by device
name:

    {"lamp": {"icon": "bulb.png", "state": true, "sliderValue": 40}, ...}

Devices are registered explicitly on a registry the application owns; a poll
only updates records that are registered and only the fields present.
"""
import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from fbrest.utils.constants import (
    MAX_DEVICES, NO_DATA,
    DEFAULT_DEVICE_ICON, DEFAULT_SLIDER_VALUE, SLIDER_MIN, SLIDER_MAX,
    DEFAULT_DEVICE_PATH,
)
from fbrest.utils.exceptions import RegistryFullError

_LOGGER = logging.getLogger(__name__)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _is_true(value) -> bool:
    return isinstance(value, bool) and value


@dataclass
class DeviceRecord:
    name: str
    icon: str = DEFAULT_DEVICE_ICON
    state: bool = False
    slider_enabled: bool = False
    slider_value: int = DEFAULT_SLIDER_VALUE
    order: int = 0

    def __post_init__(self):
        self.slider_value = _clamp(int(self.slider_value), SLIDER_MIN, SLIDER_MAX)

    def apply(self, data: dict) -> None:
        """
        Update fields present in a device object from the store.

        Every present field is converted before any is assigned, so a
        malformed value raises and leaves the record unchanged. Only JSON
        true turns state or sliderEnabled on.
        """
        changes = {}
        if "icon" in data:
            changes["icon"] = str(data["icon"])
        if "state" in data:
            changes["state"] = _is_true(data["state"])
        if "sliderEnabled" in data:
            changes["slider_enabled"] = _is_true(data["sliderEnabled"])
        if "sliderValue" in data:
            changes["slider_value"] = _clamp(int(data["sliderValue"]), SLIDER_MIN, SLIDER_MAX)
        if "order" in data:
            changes["order"] = int(data["order"])

        for field, value in changes.items():
            setattr(self, field, value)


class DeviceRegistry:
    def __init__(self, capacity: int = MAX_DEVICES):
        self.capacity = capacity
        self._devices: Dict[str, DeviceRecord] = {}

    def register(self, name: str) -> DeviceRecord:
        if name in self._devices:
            return self._devices[name]
        if len(self._devices) >= self.capacity:
            raise RegistryFullError(f"registry is full ({self.capacity} devices), cannot add '{name}'")
        record = DeviceRecord(name)
        self._devices[name] = record
        return record

    def unregister(self, name: str) -> bool:
        return self._devices.pop(name, None) is not None

    def get(self, name: str) -> Optional[DeviceRecord]:
        return self._devices.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._devices

    def __iter__(self) -> Iterator[DeviceRecord]:
        return iter(list(self._devices.values()))

    def __len__(self) -> int:
        return len(self._devices)

    def poll(self, json_text: str) -> List[str]:
        """Apply a polled document; returns the names of updated devices."""
        if not json_text or json_text == NO_DATA:
            _LOGGER.info("No device data found in the store")
            return []

        try:
            doc = json.loads(json_text)
        except json.JSONDecodeError as e:
            _LOGGER.warning("Device document is not valid JSON: %s", e)
            return []

        if not isinstance(doc, dict):
            _LOGGER.warning("Device document is a %s, expected an object", type(doc).__name__)
            return []

        updated = []
        for record in self:
            data = doc.get(record.name)
            if not isinstance(data, dict):
                continue
            try:
                record.apply(data)
            except (TypeError, ValueError) as e:
                _LOGGER.warning("Skipping malformed entry for '%s': %s", record.name, e)
                continue
            updated.append(record.name)

        if updated:
            _LOGGER.info("Updated %d device(s): %s", len(updated), ", ".join(updated))
        return updated

    def sync(self, client, path: str = DEFAULT_DEVICE_PATH) -> int:
        """Fetch *path* through a StoreClient and poll the result; returns the status code."""
        status, text = client.get_json(path)
        self.poll(text)
        return status
