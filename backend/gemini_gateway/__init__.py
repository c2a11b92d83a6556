"""Gemini Gateway: a thin HTTP proxy in front of the Gemini API."""

__version__ = "0.1.0"
