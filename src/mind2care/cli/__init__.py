"""Command line interface for mind2care."""
