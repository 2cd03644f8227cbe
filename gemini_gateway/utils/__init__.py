"""Utility helpers package (scratch file naming)."""
