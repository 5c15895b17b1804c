"""Accommodation infrastructure: HTTP routes for lodgings, rooms and vacations."""
