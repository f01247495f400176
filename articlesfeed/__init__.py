"""HTTP service, backed by SQLite, for publishing articles and browsing them as a paginated, searchable feed."""

__version__ = "0.1.0"

__all__ = ["__version__"]