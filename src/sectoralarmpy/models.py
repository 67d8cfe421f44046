"""Data models for the sectoralarmpy library.

The portal speaks PascalCase JSON with a few misspelled keys
(``PartialAvalible``, ``AnnexAvalible``, ``Temprature``).  Each model maps
those keys to snake_case attributes in ``from_api`` and back in ``to_api``.
Loosely typed vendor fields are kept as plain JSON values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .const import ArmedStatus


@dataclass(frozen=True)
class Wifi:
    """Wifi module attached to a panel."""

    exists: bool = False
    serial: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> Wifi:
        data = data or {}
        return cls(
            exists=data.get("WifiExist", False),
            serial=data.get("Serial", ""),
        )

    def to_api(self) -> dict[str, Any]:
        return {"WifiExist": self.exists, "Serial": self.serial}


@dataclass(frozen=True)
class Panel:
    """An alarm panel with its configuration and live status."""

    panel_id: str
    display_name: str
    armed_status: str
    status_annex: str
    panel_time: str
    is_online: bool
    installation_status: int

    # Capabilities
    partial_available: bool = False
    quick_arm: bool = False
    code_length: int = 0
    lock_language: int = 0
    supports_app: bool = False
    supports_interview_services: bool = False
    supports_panel_users: bool = False
    supports_temporary_panel_users: bool = False
    supports_register_devices: bool = False
    can_add_door_lock: bool = False
    can_add_smart_plug: bool = False
    has_video: bool = False
    annex_available: bool = False

    wifi: Wifi = field(default_factory=Wifi)
    iv_display_status: bool = False
    display_wizard: bool = False
    booked_start_date: str = ""
    booked_end_date: str = ""
    installation_address: Any = None
    wizard_step: int = 0
    access_group: int = 0
    session_expires: str = ""

    # Full raw response for anything we haven't modeled
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def arming_state(self) -> ArmedStatus:
        """Return the arm state as an enum, UNKNOWN for unexpected values."""
        try:
            return ArmedStatus(str(self.armed_status).lower())
        except ValueError:
            return ArmedStatus.UNKNOWN

    @property
    def is_armed(self) -> bool:
        """Return True if the panel is fully or partially armed."""
        return self.arming_state in (ArmedStatus.ARMED, ArmedStatus.PARTIAL_ARMED)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Panel:
        """Create from API response data."""
        return cls(
            panel_id=data.get("PanelId", ""),
            display_name=data.get("PanelDisplayName", ""),
            armed_status=data.get("ArmedStatus", ""),
            status_annex=data.get("StatusAnnex", ""),
            panel_time=data.get("PanelTime", ""),
            is_online=data.get("IsOnline", False),
            installation_status=data.get("InstallationStatus", 0),
            partial_available=data.get("PartialAvalible", False),
            quick_arm=data.get("PanelQuickArm", False),
            code_length=data.get("PanelCodeLength", 0),
            lock_language=data.get("LockLanguage", 0),
            supports_app=data.get("SupportsApp", False),
            supports_interview_services=data.get("SupportsInterviewServices", False),
            supports_panel_users=data.get("SupportsPanelUsers", False),
            supports_temporary_panel_users=data.get(
                "SupportsTemporaryPanelUsers", False
            ),
            supports_register_devices=data.get("SupportsRegisterDevices", False),
            can_add_door_lock=data.get("CanAddDoorLock", False),
            can_add_smart_plug=data.get("CanAddSmartPlug", False),
            has_video=data.get("HasVideo", False),
            annex_available=data.get("AnnexAvalible", False),
            wifi=Wifi.from_api(data.get("Wifi")),
            iv_display_status=data.get("IVDisplayStatus", False),
            display_wizard=data.get("DisplayWizard", False),
            booked_start_date=data.get("BookedStartDate", ""),
            booked_end_date=data.get("BookedEndDate", ""),
            installation_address=data.get("InstallationAddress"),
            wizard_step=data.get("WizardStep", 0),
            access_group=data.get("AccessGroup", 0),
            session_expires=data.get("SessionExpires", ""),
            raw=data,
        )

    def to_api(self) -> dict[str, Any]:
        """Return the panel in the portal's JSON shape."""
        return {
            **self.raw,
            "PartialAvalible": self.partial_available,
            "PanelQuickArm": self.quick_arm,
            "PanelCodeLength": self.code_length,
            "LockLanguage": self.lock_language,
            "SupportsApp": self.supports_app,
            "SupportsInterviewServices": self.supports_interview_services,
            "SupportsPanelUsers": self.supports_panel_users,
            "SupportsTemporaryPanelUsers": self.supports_temporary_panel_users,
            "SupportsRegisterDevices": self.supports_register_devices,
            "CanAddDoorLock": self.can_add_door_lock,
            "CanAddSmartPlug": self.can_add_smart_plug,
            "HasVideo": self.has_video,
            "Wifi": self.wifi.to_api(),
            "PanelId": self.panel_id,
            "ArmedStatus": self.armed_status,
            "PanelDisplayName": self.display_name,
            "StatusAnnex": self.status_annex,
            "PanelTime": self.panel_time,
            "AnnexAvalible": self.annex_available,
            "IVDisplayStatus": self.iv_display_status,
            "DisplayWizard": self.display_wizard,
            "BookedStartDate": self.booked_start_date,
            "BookedEndDate": self.booked_end_date,
            "InstallationStatus": self.installation_status,
            "InstallationAddress": self.installation_address,
            "WizardStep": self.wizard_step,
            "AccessGroup": self.access_group,
            "SessionExpires": self.session_expires,
            "IsOnline": self.is_online,
        }


@dataclass(frozen=True)
class Smartplug:
    """A smart plug attached to a panel."""

    id: str
    label: str
    serial_no: str
    status: str
    panel_id: Any = None
    consumption: Any = None
    display_scenarios: bool = False
    scenarios: Any = None
    timer_active: bool = False
    timer_events: Any = None
    timer_events_schedule: Any = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Smartplug:
        """Create from API response data."""
        return cls(
            id=data.get("Id", ""),
            label=data.get("Label", ""),
            serial_no=data.get("SerialNo", ""),
            status=data.get("Status", ""),
            panel_id=data.get("PanelId"),
            consumption=data.get("Consumption"),
            display_scenarios=data.get("DisplayScenarios", False),
            scenarios=data.get("Scenarios"),
            timer_active=data.get("TimerActive", False),
            timer_events=data.get("TimerEvents"),
            timer_events_schedule=data.get("TimerEventsSchedule"),
            raw=data,
        )

    def to_api(self) -> dict[str, Any]:
        return {
            **self.raw,
            "Consumption": self.consumption,
            "DisplayScenarios": self.display_scenarios,
            "Id": self.id,
            "Label": self.label,
            "PanelId": self.panel_id,
            "SerialNo": self.serial_no,
            "Scenarios": self.scenarios,
            "Status": self.status,
            "TimerActive": self.timer_active,
            "TimerEvents": self.timer_events,
            "TimerEventsSchedule": self.timer_events_schedule,
        }


@dataclass(frozen=True)
class Temperature:
    """A temperature reading from one sensor."""

    id: Any
    label: str
    serial_no: str
    temperature: str
    device_id: Any = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def celsius(self) -> float | None:
        """Return the reading as a float, or None if it isn't numeric."""
        try:
            return float(str(self.temperature).replace(",", "."))
        except ValueError:
            return None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Temperature:
        """Create from API response data."""
        return cls(
            id=data.get("Id"),
            label=data.get("Label", ""),
            serial_no=data.get("SerialNo", ""),
            temperature=data.get("Temprature", ""),
            device_id=data.get("DeviceId"),
            raw=data,
        )

    def to_api(self) -> dict[str, Any]:
        return {
            **self.raw,
            "Id": self.id,
            "Label": self.label,
            "SerialNo": self.serial_no,
            "Temprature": self.temperature,
            "DeviceId": self.device_id,
        }


@dataclass(frozen=True)
class Overview:
    """Everything the portal reports for one panel.

    Locks, cameras and photos are passed through as-is.
    """

    panel: Panel
    smartplugs: list[Smartplug] = field(default_factory=list)
    temperatures: list[Temperature] = field(default_factory=list)
    locks: list[Any] | None = None
    cameras: list[Any] | None = None
    photos: list[Any] | None = None
    access: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Overview:
        """Create from API response data."""
        return cls(
            panel=Panel.from_api(data.get("Panel") or {}),
            smartplugs=[Smartplug.from_api(s) for s in data.get("Smartplugs") or []],
            temperatures=[
                Temperature.from_api(t) for t in data.get("Temperatures") or []
            ],
            locks=data.get("Locks"),
            cameras=data.get("Cameras"),
            photos=data.get("Photos"),
            access=data.get("Access") or [],
            raw=data,
        )

    def to_api(self) -> dict[str, Any]:
        return {
            **self.raw,
            "Panel": self.panel.to_api(),
            "Locks": self.locks,
            "Smartplugs": [s.to_api() for s in self.smartplugs],
            "Temperatures": [t.to_api() for t in self.temperatures],
            "Cameras": self.cameras,
            "Photos": self.photos,
            "Access": self.access,
        }
