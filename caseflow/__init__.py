"""Client case management: benefits eligibility screening."""

__version__ = "0.1.0"
