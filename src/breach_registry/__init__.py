"""Track which email accounts appear in which data breaches."""

__version__ = "0.1.0"
