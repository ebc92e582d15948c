"""Application use cases: catalog access and matching."""
