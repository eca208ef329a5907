"""Inline annotation styling for HTML document trees."""
