"""Runtime services (telemetry) shared by the navigation core."""
