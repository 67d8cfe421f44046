"""Constants for the sectoralarmpy library."""

from enum import StrEnum

# Sector Alarm portal base URL
BASE_URL = "https://mypagesapi.sectoralarm.net"

# Endpoints (the temperature path is misspelled on the server side)
LOGIN_PATH = "/User/Login"
VERSION_PATH = "/"
PANEL_LIST_PATH = "/Panel/GetPanelList/"
OVERVIEW_PATH = "/Panel/GetOverview/"
TEMPERATURES_PATH = "/Panel/GetTempratures/"

# Login is accepted with a redirect, anything else is a rejection
LOGIN_SUCCESS_STATUS = 302

# Script reference on the landing page carrying the version token
VERSION_PATTERN = r'"/Scripts/main\.js\?(v[A-Z0-9_]*)"'

# Request timeout in seconds
DEFAULT_TIMEOUT = 30

# User agent
USER_AGENT = "sectoralarmpy/0.1.0"


class ArmedStatus(StrEnum):
    """Panel arm states as reported in the ``ArmedStatus`` field."""

    ARMED = "armed"
    PARTIAL_ARMED = "partialarmed"
    DISARMED = "disarmed"
    UNKNOWN = "unknown"
