"""In-memory blockchain runtime modules and a SHA3 proof of work."""

__version__ = "3.0.0"