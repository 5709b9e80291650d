"""Adaptadores de salida (exportación)."""
