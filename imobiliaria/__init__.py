"""Manage a catalogue of real-estate properties stored in a plain-text file."""

__version__ = "1.0.0"