"""Helper utilities for the add-on scaffold."""
