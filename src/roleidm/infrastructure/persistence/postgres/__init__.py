"""PostgreSQL role store."""
