"""Domain layer: entities, invariants and repository contracts."""
