"""
econet24.commands
=================
Parameter reads and writes over an authenticated :class:`EconetSession`.

Every command is a plain GET against ``<base>/service/<endpoint>``:

  getDeviceParams?uid=U&_=TS                                  → {"curr": {...}}
  rmCurrNewParam?uid=U&newParamKey=K&newParamValue=V&_=TS     (by key)
  rmNewParam?uid=U&newParamIndex=N&newParamValue=V&_=TS       (by index)
  newParam?uid=U&newParamName=NAME&newParamValue=V&_=TS       (by name)

``_`` is a cache-busting Unix timestamp.  A write is acknowledged by
HTTP 200 alone; the body carries no structured confirmation.
"""

import time

import requests

from .config import DEVICE_PARAMS
from .errors import DecodeError, StatusError, TransportError
from .logging_setup import log
from .models import ByIndex, ByKey, ByName, DeviceParameters, ParameterAddress
from .session import EconetSession


def _timestamp(now: int | None) -> int:
    return int(time.time()) if now is None else now


def build_read_params(uid: str, now: int | None = None) -> dict[str, str]:
    """Query string for ``getDeviceParams``."""
    return {"uid": uid, "_": str(_timestamp(now))}


def build_write_params(
    uid: str, address: ParameterAddress, value: int, now: int | None = None
) -> tuple[str, dict[str, str]]:
    """
    Return ``(endpoint, query)`` for writing *value* to *address*.

    The endpoint and the query parameter carrying the address are picked by
    the address type; anything other than ByKey/ByIndex/ByName is a
    TypeError.
    """
    if not isinstance(address, (ByKey, ByIndex, ByName)):
        raise TypeError(f"unsupported parameter address: {address!r}")
    if isinstance(address, ByIndex):
        if isinstance(address.index, bool) or not isinstance(address.index, int):
            raise TypeError(f"parameter index must be an integer, got {address.index!r}")
    elif not isinstance(address.name, str) or not address.name:
        raise TypeError(f"parameter name must be a non-empty string, got {address.name!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"parameter value must be an integer, got {value!r}")
    command = address.command
    query = {
        "uid": uid,
        command.param: address.address,
        "newParamValue": str(value),
        "_": str(_timestamp(now)),
    }
    return command.endpoint, query


def _get(session: EconetSession, endpoint: str, params: dict[str, str]) -> requests.Response:
    url = session.service_url(endpoint)
    log.debug("GET %s %s", url, params)
    try:
        return session.http.get(url, params=params, timeout=session.timeout)
    except requests.RequestException as exc:
        raise TransportError(endpoint, str(exc)) from exc


def read_parameters(session: EconetSession, uid: str) -> DeviceParameters:
    """Fetch a fresh telemetry snapshot for device *uid*."""
    resp = _get(session, DEVICE_PARAMS, build_read_params(uid))
    try:
        if resp.status_code != 200:
            raise StatusError(DEVICE_PARAMS, resp.status_code)
        try:
            body = resp.json()
        except ValueError as exc:
            raise DecodeError(DEVICE_PARAMS, f"invalid JSON: {exc}") from exc
    finally:
        resp.close()

    if not isinstance(body, dict) or "curr" not in body:
        raise DecodeError(DEVICE_PARAMS, "response has no 'curr' record")
    try:
        return DeviceParameters.from_dict(body["curr"])
    except ValueError as exc:
        raise DecodeError(DEVICE_PARAMS, str(exc)) from exc


def write_parameter(
    session: EconetSession, uid: str, address: ParameterAddress, value: int
) -> None:
    """Send one parameter write; raises RequestError unless the service answers 200."""
    endpoint, params = build_write_params(uid, address, value)
    resp = _get(session, endpoint, params)
    try:
        if resp.status_code != 200:
            raise StatusError(endpoint, resp.status_code)
        log.debug("%s response: %s", endpoint, resp.text[:200])
    finally:
        resp.close()
    log.info("Set %s=%s to %d", address.command.param, address.address, value)