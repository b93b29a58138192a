"""HTTP API for exercise progress."""
