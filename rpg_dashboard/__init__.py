"""Runs per Game dashboard for historical team-season statistics."""

__version__ = "0.1.0"
