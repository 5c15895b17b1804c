"""Accommodation context: lodgings, rooms and vacations."""
