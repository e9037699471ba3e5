"""Layered configuration (embedded defaults, INI files, environment)."""
