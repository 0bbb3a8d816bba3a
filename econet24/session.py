"""HTTP session management for the econet24 client."""

from dataclasses import dataclass

import requests

from .config import SERVICE_PATH


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session with browser-like headers pre-configured.

    No retry adapter is mounted: a failed request is reported to the caller
    as-is.
    """
    session = requests.Session()
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        "Connection": "keep-alive",
    })
    return session


def base_url(host: str) -> str:
    """
    Normalise *host* into a base URL without a trailing slash.

    A bare hostname gets an ``https://`` scheme.
    """
    host = host.strip().rstrip("/")
    if not host.startswith(("http://", "https://")):
        host = f"https://{host}"
    return host


@dataclass
class EconetSession:
    """
    An authenticated econet24 session.

    Owns the cookie-bearing ``requests.Session`` and the anti-forgery token
    captured at login.  It is only ever built by a successful login and is
    never refreshed.

    Not thread-safe: the underlying cookie jar is mutated by every response,
    so one session must not be shared between threads without external
    locking.
    """

    http: requests.Session
    base_url: str
    csrf_token: str
    timeout: float | None = None

    @property
    def cookies(self) -> requests.cookies.RequestsCookieJar:
        return self.http.cookies

    def service_url(self, endpoint: str) -> str:
        return self.base_url + SERVICE_PATH + endpoint

    def close(self) -> None:
        self.http.close()
