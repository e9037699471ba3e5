"""Daystrip logic: options namespace, validation, schema and adapter."""
