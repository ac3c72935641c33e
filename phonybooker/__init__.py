"""A small in-memory terminal phonebook and a megaphone command."""

__version__ = "0.1.0"