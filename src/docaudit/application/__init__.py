"""Application layer: use cases and input preconditions."""
