"""Domain layer: models, value objects, repositories and services."""
