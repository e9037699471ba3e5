"""Daystrip models: field descriptors and the typed settings snapshot."""
