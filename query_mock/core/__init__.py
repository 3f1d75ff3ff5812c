"""Core layer - query model, parameter extraction, registries and matching."""
