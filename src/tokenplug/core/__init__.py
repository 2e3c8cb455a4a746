"""Core token model, loading, configuration and grouping."""
