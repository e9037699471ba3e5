"""Host framework pieces used by features."""
