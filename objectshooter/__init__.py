"""Seed SQLite tables with generated JSON records and replay them as HTTP traffic."""

__version__ = "0.1.0"