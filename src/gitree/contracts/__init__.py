"""Output contracts for machine-readable reports."""

from .validation import schema_path_for, validate

__all__ = ["schema_path_for", "validate"]
