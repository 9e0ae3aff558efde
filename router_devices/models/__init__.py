from router_devices.models.session import PageState
from router_devices.models.wifi import WifiConnectedDevice, WifiInfo

__all__ = ["PageState", "WifiConnectedDevice", "WifiInfo"]
