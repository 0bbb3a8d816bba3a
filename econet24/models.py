"""
econet24.models
===============
Value types shared by the session and command layers.

* :class:`BoilerStatus`     – closed set of controller states
* :class:`CommandType`      – the three remote addressing modes
* :class:`ByKey`, :class:`ByIndex`, :class:`ByName` – parameter addresses
* :class:`DeviceParameters` – telemetry snapshot from ``getDeviceParams``
"""

import math
from dataclasses import asdict, dataclass, fields
from enum import Enum, IntEnum
from typing import Any, Union

from .config import WRITE_BY_INDEX, WRITE_BY_KEY, WRITE_BY_NAME


class BoilerStatus(IntEnum):
    """Operational state of the boiler, transmitted as a small integer."""

    TURNED_OFF      = 0
    FIRE_UP_1       = 1
    FIRE_UP_2       = 2
    WORK            = 3
    SUPERVISION     = 4
    HALTED          = 5
    STOP            = 6
    BURNING_OFF     = 7
    MANUAL          = 8
    ALARM           = 9
    UNSEALING       = 10
    CHIMNEY         = 11
    STABILIZATION   = 12
    NO_TRANSMISSION = 13

    @classmethod
    def parse(cls, value: Union["BoilerStatus", int, str]) -> "BoilerStatus":
        """
        Coerce *value* into a member.

        Accepts a member, its integer value, or its name in any case
        (``"work"``, ``"fire-up-1"``).  Anything else raises ``ValueError``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"invalid boiler status: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls(int(text))
            try:
                return cls[text.upper().replace("-", "_")]
            except KeyError:
                raise ValueError(f"invalid boiler status: {value!r}") from None
        raise ValueError(f"invalid boiler status: {value!r}")


class CommandType(Enum):
    """Addressing mode of a write: (service endpoint, query parameter)."""

    KEY   = (WRITE_BY_KEY, "newParamKey")
    INDEX = (WRITE_BY_INDEX, "newParamIndex")
    NAME  = (WRITE_BY_NAME, "newParamName")

    @property
    def endpoint(self) -> str:
        return self.value[0]

    @property
    def param(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ByKey:
    """Parameter addressed by its symbolic key (``rmCurrNewParam``)."""

    name: str
    command = CommandType.KEY

    @property
    def address(self) -> str:
        return str(self.name)


@dataclass(frozen=True)
class ByIndex:
    """Parameter addressed by its numeric index (``rmNewParam``)."""

    index: int
    command = CommandType.INDEX

    @property
    def address(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class ByName:
    """Named composite setting such as ``BOILER_STATUS`` (``newParam``)."""

    name: str
    command = CommandType.NAME

    @property
    def address(self) -> str:
        return str(self.name)


ParameterAddress = Union[ByKey, ByIndex, ByName]


_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

# dataclass field -> (wire name, type)
_WIRE_FIELDS: dict[str, tuple[str, type]] = {
    "pump_co_works":   ("pumpCOWorks",   bool),
    "boiler_power":    ("boilerPower",   int),
    "boiler_power_kw": ("boilerPowerKW", float),
    "temp_co_set":     ("tempCOSet",     float),
    "temp_co":         ("tempCO",        float),
    "temp_cwu_set":    ("tempCWUSet",    float),
    "temp_cwu":        ("tempCWU",       float),
    "temp_feeder":     ("tempFeeder",    float),
    "fan_works":       ("fanWorks",      bool),
    "fuel_stream":     ("fuelStream",    float),
    "fuel_level":      ("fuelLevel",     int),
    "operation_mode":  ("mode",          int),
}


@dataclass(frozen=True)
class DeviceParameters:
    """Read-only telemetry snapshot, produced fresh by every read."""

    pump_co_works: bool = False
    boiler_power: int = 0
    boiler_power_kw: float = 0.0
    temp_co_set: float = 0.0
    temp_co: float = 0.0
    temp_cwu_set: float = 0.0
    temp_cwu: float = 0.0
    temp_feeder: float = 0.0
    fan_works: bool = False
    fuel_stream: float = 0.0
    fuel_level: int = 0
    operation_mode: int = 0

    @classmethod
    def from_dict(cls, curr: dict[str, Any]) -> "DeviceParameters":
        """
        Build a snapshot from the ``curr`` record of ``getDeviceParams``.

        Missing fields keep their zero value.  A present field that cannot
        be converted raises ``ValueError``.
        """
        if not isinstance(curr, dict):
            raise ValueError(f"expected an object, got {type(curr).__name__}")
        values = {}
        for attr, (wire, kind) in _WIRE_FIELDS.items():
            raw = curr.get(wire)
            if raw is None:
                continue
            values[attr] = _convert(wire, raw, kind)
        return cls(**values)

    def as_dict(self) -> dict[str, Any]:
        """Return the snapshot keyed by the remote field names."""
        data = asdict(self)
        return {_WIRE_FIELDS[f.name][0]: data[f.name] for f in fields(self)}


def _convert(wire: str, raw: Any, kind: type) -> Any:
    if kind is bool:
        if not isinstance(raw, bool):
            raise ValueError(f"{wire}: expected a boolean, got {raw!r}")
        return raw
    # JSON numbers only; numeric strings are rejected
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{wire}: expected a number, got {raw!r}")
    if kind is int:
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ValueError(f"{wire}: expected an integer, got {raw!r}")
            raw = int(raw)
        if not _INT64_MIN <= raw <= _INT64_MAX:
            raise ValueError(f"{wire}: integer out of range")
        return raw
    try:
        number = float(raw)
    except OverflowError:
        raise ValueError(f"{wire}: number out of range") from None
    if not math.isfinite(number):
        raise ValueError(f"{wire}: expected a finite number, got {raw!r}")
    return number
