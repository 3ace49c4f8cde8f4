"""Persistence of VDF solutions."""
