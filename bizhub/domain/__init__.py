"""Domain layer: value objects and rules shared by the ORM models."""
