# Service layer for the WiFi provisioning panel
# - device_client: HTTP client for the device's /status, /save and /clear endpoints
# - status_poller: periodic /status polling rendered into DeviceState (NiceGUI timer)
# - notifications: transient success/error messages
# - actions:       save/clear credentials with operator feedback
