"""health-profile: personal health profile manager."""

__version__ = "0.1.0"
