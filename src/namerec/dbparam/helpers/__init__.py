"""Helpers for arrays, dates and JSON."""
