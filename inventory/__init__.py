"""Stock reservation and compensation over a PostgreSQL inventory table."""

__version__ = "0.1.0"

__all__ = ["api", "entity", "postgres", "repo", "server", "usecase"]