"""Probe configuration, records and the platform probe itself."""
