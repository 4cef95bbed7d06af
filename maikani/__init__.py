"""Critical-subject aggregator for the WaniKani API."""

__version__ = "1.0.0"
