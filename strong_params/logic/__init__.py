"""Parameter containers, normalization and request-scoped loading."""
