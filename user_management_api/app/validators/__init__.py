"""Field-level validation of incoming requests."""
