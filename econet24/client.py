"""High-level econet24 client: eager login plus the controller commands."""

from .auth import establish
from .commands import read_parameters, write_parameter
from .config import (
    BOILER_STATUS_NAME,
    CO_TEMP_KEY,
    DEFAULT_HOST,
    HUW_HEATER_INDEX,
    HUW_TEMP_KEY,
)
from .models import BoilerStatus, ByIndex, ByKey, ByName, DeviceParameters, ParameterAddress
from .session import build_session


class Econet24Client:
    """
    Session-authenticated client for one econet24 controller.

    Construction performs the whole login handshake and raises AuthError on
    failure, so an instance always holds an authenticated session.  There
    is no re-login: once the remote session expires, build a new client.

    An instance is meant for a single owner issuing calls one at a time.
    Its cookie jar is mutated by every response; sharing one client between
    threads needs external locking.  Separate instances share nothing.

    Usage::

        with Econet24Client("user", "secret", uid="ABC123") as client:
            params = client.read_parameters()
            client.set_boiler_status(BoilerStatus.WORK)
    """

    def __init__(
        self,
        username: str,
        password: str,
        uid: str,
        host: str = DEFAULT_HOST,
        *,
        verify_ssl: bool = True,
        timeout: float | None = None,
    ) -> None:
        self.uid = uid
        http = build_session(verify_ssl=verify_ssl)
        try:
            self.session = establish(http, host, username, password, timeout=timeout)
        except Exception:
            http.close()
            raise

    @property
    def base_url(self) -> str:
        return self.session.base_url

    def read_parameters(self) -> DeviceParameters:
        return read_parameters(self.session, self.uid)

    def write_parameter(self, address: ParameterAddress, value: int) -> None:
        write_parameter(self.session, self.uid, address, value)

    def set_hot_water_heater_status(self, status: int) -> None:
        """Switch the hot-water (HUW) heater, parameter index 59."""
        self.write_parameter(ByIndex(HUW_HEATER_INDEX), status)

    def set_boiler_status(self, status: BoilerStatus | int | str) -> None:
        """
        Command the boiler into *status*.

        Values outside :class:`BoilerStatus` raise ValueError before any
        request is sent.
        """
        status = BoilerStatus.parse(status)
        self.write_parameter(ByName(BOILER_STATUS_NAME), int(status))

    def set_co_temperature(self, value: int) -> None:
        """Set the central-heating (CO) circuit setpoint."""
        self.write_parameter(ByKey(str(CO_TEMP_KEY)), value)

    def set_hot_water_temperature(self, value: int) -> None:
        """Set the hot-water (HUW) setpoint."""
        self.write_parameter(ByKey(str(HUW_TEMP_KEY)), value)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Econet24Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
