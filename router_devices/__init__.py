"""
router-devices - Log into a consumer router's web UI and list connected devices.

Commands:
1. auth - Log in (or reuse a cached session) and save the session cookies
2. list - Print the devices on the main and guest wifi networks
"""

__version__ = "1.0.0"
