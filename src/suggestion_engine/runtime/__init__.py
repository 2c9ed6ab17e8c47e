"""Runtime services: telemetry and settings."""
