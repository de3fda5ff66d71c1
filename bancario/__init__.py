"""Bank account and transaction registry with a full-screen terminal interface."""

__version__ = "1.0.0"