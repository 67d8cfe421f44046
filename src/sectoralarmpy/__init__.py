"""sectoralarmpy — Python client library for the Sector Alarm web portal.

Usage:
    from sectoralarmpy import SectorAlarmClient

    async with aiohttp.ClientSession(cookie_jar=aiohttp.DummyCookieJar()) as session:
        client = SectorAlarmClient(session, "user@example.com", "secret")
        await client.async_login()
        for panel in await client.async_get_panel_list():
            temperatures = await client.async_get_temperatures(panel.panel_id)
            for sensor in temperatures:
                print(f"{sensor.label}: {sensor.temperature}")
"""

from .client import SectorAlarmClient, extract_version_token
from .const import ArmedStatus
from .exceptions import (
    SectorAlarmApiError,
    SectorAlarmAuthError,
    SectorAlarmConnectionError,
    SectorAlarmError,
    SectorAlarmResponseError,
    SectorAlarmVersionNotFoundError,
)
from .models import Overview, Panel, Smartplug, Temperature, Wifi

__all__ = [
    "SectorAlarmClient",
    "extract_version_token",
    "ArmedStatus",
    "SectorAlarmError",
    "SectorAlarmAuthError",
    "SectorAlarmApiError",
    "SectorAlarmConnectionError",
    "SectorAlarmResponseError",
    "SectorAlarmVersionNotFoundError",
    "Overview",
    "Panel",
    "Smartplug",
    "Temperature",
    "Wifi",
]

__version__ = "0.1.0"
