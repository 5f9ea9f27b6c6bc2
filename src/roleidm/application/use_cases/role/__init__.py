"""Role use cases."""
