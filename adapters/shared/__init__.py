"""Helpers shared by the format adapters."""
