"""Domain layer for device-port bindings."""
