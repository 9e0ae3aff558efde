from router_devices.cli import app

app(prog_name="router-devices")
