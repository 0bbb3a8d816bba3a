"""Shared fakes for the econet24 tests."""

import json
from unittest.mock import MagicMock

import requests

from econet24.session import EconetSession, build_session

BASE = "https://www.econet24.com"

LOGIN_PAGE = """
<html><body>
<form method="post" action="/login/?next=main">
  <input type="hidden" name="csrfmiddlewaretoken" value="tok3nVALUE">
  <input type="text" name="username">
  <input type="password" name="password">
</form>
</body></html>
"""


def make_response(status_code=200, text="", url=BASE):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    resp.url = url
    resp.headers = {}
    resp.cookies = requests.cookies.RequestsCookieJar()
    resp.json.side_effect = lambda: json.loads(text)
    return resp


def make_session(timeout=None):
    return EconetSession(
        http=build_session(), base_url=BASE, csrf_token="tok3nVALUE", timeout=timeout
    )
