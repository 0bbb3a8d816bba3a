"""Login handshake against the econet24 web service."""

import requests

from ..config import CSRF_FIELD, LOGIN_PATH
from ..errors import AuthError
from ..logging_setup import log
from ..session import EconetSession, base_url
from .token import extract_form_field


def establish(
    session: requests.Session,
    host: str,
    username: str,
    password: str,
    timeout: float | None = None,
) -> EconetSession:
    """
    Authenticate *session* against the econet24 login form.

      GET  <base>                      → landing page with the Django login form
      POST <base>/login/?next=main     csrfmiddlewaretoken / username / password

    Cookies set by both responses stay in *session*.  Any failure raises
    AuthError; wrong credentials and a failing service are reported the
    same way.  Nothing is retried.
    """
    base = base_url(host)

    # Step 1 – landing page
    try:
        resp = session.get(base, timeout=timeout)
    except requests.RequestException as exc:
        raise AuthError(f"cannot open {base}: {exc}") from exc
    try:
        if resp.status_code != 200:
            raise AuthError(f"landing page returned HTTP {resp.status_code}")
        html = resp.text
    finally:
        resp.close()

    # Step 2 – anti-forgery token
    token = extract_form_field(html, CSRF_FIELD)
    if not token:
        raise AuthError(f"no {CSRF_FIELD} input on {base}")
    log.debug("CSRF token: %s", token)

    # Step 3 – submit credentials
    payload = {
        CSRF_FIELD: token,
        "username": username,
        "password": password,
    }
    try:
        resp = session.post(
            base + LOGIN_PATH,
            data=payload,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Referer": base + "/",
            },
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise AuthError(f"login POST failed: {exc}") from exc
    try:
        if resp.status_code != 200:
            raise AuthError(f"credentials rejected (HTTP {resp.status_code})")
    finally:
        resp.close()

    log.info(
        "Login successful for %s at %s. Active cookies: %s",
        username,
        base,
        list(session.cookies.keys()),
    )
    return EconetSession(http=session, base_url=base, csrf_token=token, timeout=timeout)
