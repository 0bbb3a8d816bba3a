"""
econet24
========
Python client for the econet24 boiler-control web service.

Package structure
-----------------
econet24/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – exception hierarchy
├── models.py         – BoilerStatus, parameter addresses, DeviceParameters
├── session.py        – requests.Session factory and EconetSession
├── auth/             – login handshake and anti-forgery token scraping
├── commands.py       – getDeviceParams / rmCurrNewParam / rmNewParam / newParam
├── client.py         – Econet24Client
└── cli.py            – argparse CLI (``python -m econet24``)

Quick start
-----------
    from econet24 import Econet24Client, BoilerStatus

    with Econet24Client("user", "password", uid="2L7SDPN6KQ38CIH2401K01U") as client:
        print(client.read_parameters().temp_co)
        client.set_boiler_status(BoilerStatus.WORK)
"""

from .client import Econet24Client
from .errors import (
    AuthError,
    DecodeError,
    Econet24Error,
    RequestError,
    StatusError,
    TransportError,
)
from .models import (
    BoilerStatus,
    ByIndex,
    ByKey,
    ByName,
    CommandType,
    DeviceParameters,
)

__all__ = [
    "Econet24Client",
    "Econet24Error",
    "AuthError",
    "RequestError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "BoilerStatus",
    "CommandType",
    "ByKey",
    "ByIndex",
    "ByName",
    "DeviceParameters",
]
