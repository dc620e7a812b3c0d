"""Domain layer: value types and collaborator protocols."""
