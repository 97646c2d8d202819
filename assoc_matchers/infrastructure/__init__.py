"""Infrastructure: SQLAlchemy implementations of the application ports."""
