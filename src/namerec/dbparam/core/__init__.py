"""Core types, settings and dialect handling."""
