"""Configuration constants for the econet24 client."""

import os

DEFAULT_HOST = os.environ.get("ECONET24_HOST", "https://www.econet24.com")
# Credentials can also be supplied via ECONET24_USER / ECONET24_PASSWORD env vars
DEFAULT_USER = os.environ.get("ECONET24_USER", "")
DEFAULT_PASSWORD = os.environ.get("ECONET24_PASSWORD", "")
DEFAULT_UID = os.environ.get("ECONET24_UID", "")

LOGIN_PATH   = "/login/?next=main"
SERVICE_PATH = "/service/"
CSRF_FIELD   = "csrfmiddlewaretoken"

# Read endpoint
DEVICE_PARAMS = "getDeviceParams"

# Write endpoints, one per addressing mode
WRITE_BY_KEY   = "rmCurrNewParam"
WRITE_BY_INDEX = "rmNewParam"
WRITE_BY_NAME  = "newParam"

# Well-known controller parameters
HUW_HEATER_INDEX   = 59      # hot-water heater on/off, addressed by index
CO_TEMP_KEY        = 1280    # CO circuit setpoint, addressed by key
HUW_TEMP_KEY       = 1281    # hot-water setpoint, addressed by key
BOILER_STATUS_NAME = "BOILER_STATUS"
