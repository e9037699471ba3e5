"""Test session setup: keep log entries in memory only."""

import os

os.environ.setdefault("DAYSTRIP_LOGGING__PERSIST", "false")
