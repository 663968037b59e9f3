"""Todo service with domain events and live completion notifications."""

__version__ = "0.1.0"
