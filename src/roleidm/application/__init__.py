"""Application layer - ports, DTOs and use cases."""
