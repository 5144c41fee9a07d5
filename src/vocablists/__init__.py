"""Persistence layer for a vocabulary trainer: settings, custom word lists, list selections."""

__version__ = "0.1.0"
