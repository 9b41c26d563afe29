"""Cancellation token and cancelled error (one class per module)."""
