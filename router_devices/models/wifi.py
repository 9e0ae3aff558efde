"""Pydantic models for the router's wifi status payload."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WifiConnectedDevice(BaseModel):
    """A device seen on one of the router's wifi networks."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    device_class: Optional[str] = Field(default=None, alias="Class")
    connected_time: Optional[str] = Field(
        default=None,
        alias="ConnectedTime",
        description="Unix epoch seconds of the last connection, as a string",
    )
    ipv4: Optional[str] = Field(default=None, alias="IPv4")
    dhcp_lease_ip: Optional[str] = Field(default=None, alias="DhcpLeaseIP")
    ipv6: Optional[str] = Field(default=None, alias="IPv6")
    hostname: Optional[str] = Field(default=None, alias="HostName")
    friendly_name: Optional[str] = Field(default=None, alias="FriendlyName")
    mac_address: Optional[str] = Field(default=None, alias="MACAddress")
    state: Optional[str] = Field(default=None, alias="State")  # "0" or "1"
    manufacturer: Optional[str] = Field(default=None, alias="Manufacturer")

    @property
    def is_connected(self) -> bool:
        return self.state == "1"

    @property
    def best_ipv4(self) -> Optional[str]:
        """The DHCP lease address when the router has one, else the plain IPv4."""
        return self.dhcp_lease_ip or self.ipv4 or None


class WifiInfo(BaseModel):
    """Snapshot of the router's wifi overview."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Active device counts
    guest_active_count: int = Field(default=0, alias="guestActiveCount")
    main_wifi_active_count: int = Field(default=0, alias="mainWifiActiveCount")
    wifi_active_count: int = Field(default=0, alias="wifiActiveCount")

    # Device lists per SSID/band
    wifi_list_24: list[WifiConnectedDevice] = Field(default_factory=list, alias="wifiList24")
    wifi_list_5: list[WifiConnectedDevice] = Field(default_factory=list, alias="wifiList5")
    guest_wifi_24: list[WifiConnectedDevice] = Field(default_factory=list, alias="guestWifi24")
    guest_wifi_5: list[WifiConnectedDevice] = Field(default_factory=list, alias="guestWifi5")

    @field_validator("wifi_list_24", "wifi_list_5", "guest_wifi_24", "guest_wifi_5", mode="before")
    @classmethod
    def null_list_is_empty(cls, v):
        return [] if v is None else v
