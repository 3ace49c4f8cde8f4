"""Converters between integers, solutions and their stored forms."""
