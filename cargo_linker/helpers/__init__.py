"""Helper utilities for terminal output and path filtering."""
