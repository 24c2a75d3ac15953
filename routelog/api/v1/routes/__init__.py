"""API v1 route modules."""
