"""schack — a click-driven chess board front end."""

__version__ = "0.1.0"
