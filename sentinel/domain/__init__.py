"""Domain layer: protocols (ports), entities and enums.

The domain layer has no dependencies on infrastructure or presentation.
"""
