"""Event-staffing quotation calculator."""

__version__ = "0.1.0"
