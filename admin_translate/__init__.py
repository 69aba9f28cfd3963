"""Localized, tab-arranged form inputs for translated admin records."""

__version__ = "0.1.0"
