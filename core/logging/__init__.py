"""Feature/event logging."""
