"""Generate a typed Python bot API client from an api.json schema document."""
