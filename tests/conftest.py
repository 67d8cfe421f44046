"""Pytest configuration and fixtures for sectoralarmpy tests."""

from __future__ import annotations

from typing import Any

import pytest

from tests.helpers import FakeSession


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def panel_data() -> dict[str, Any]:
    return {
        "PartialAvalible": True,
        "PanelQuickArm": False,
        "PanelCodeLength": 6,
        "LockLanguage": 1,
        "SupportsApp": True,
        "SupportsInterviewServices": False,
        "SupportsPanelUsers": True,
        "SupportsTemporaryPanelUsers": False,
        "SupportsRegisterDevices": True,
        "CanAddDoorLock": True,
        "CanAddSmartPlug": True,
        "HasVideo": False,
        "Wifi": {"WifiExist": True, "Serial": "W123"},
        "PanelId": "01234567",
        "ArmedStatus": "disarmed",
        "PanelDisplayName": "Home",
        "StatusAnnex": "unknown",
        "PanelTime": "/Date(1620000000000)/",
        "AnnexAvalible": False,
        "IVDisplayStatus": False,
        "DisplayWizard": False,
        "BookedStartDate": "/Date(-62135596800000)/",
        "BookedEndDate": "/Date(-62135596800000)/",
        "InstallationStatus": 3,
        "InstallationAddress": None,
        "WizardStep": 0,
        "AccessGroup": 1,
        "SessionExpires": "/Date(1620003600000)/",
        "IsOnline": True,
    }


@pytest.fixture
def overview_data(panel_data: dict[str, Any]) -> dict[str, Any]:
    return {
        "Panel": panel_data,
        "Locks": [{"Serial": "L1", "Status": "locked", "Extra": [1, 2]}],
        "Smartplugs": [
            {
                "Consumption": None,
                "DisplayScenarios": False,
                "Id": "42",
                "Label": "Lamp",
                "PanelId": None,
                "SerialNo": "SP1",
                "Scenarios": [],
                "Status": "On",
                "TimerActive": False,
                "TimerEvents": [],
                "TimerEventsSchedule": None,
            }
        ],
        "Temperatures": [
            {
                "Id": 1,
                "Label": "Kitchen",
                "SerialNo": "S1",
                "Temprature": "21.5",
                "DeviceId": 2,
            }
        ],
        "Cameras": [{"Name": "Hall", "Stream": {"Url": "rtsp://x"}}],
        "Photos": [],
        "Access": ["History", "Settings"],
    }
