"""Web dashboard for the automated irrigation controller."""

__version__ = "1.0.0"
