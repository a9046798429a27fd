"""Infrastructure: SQLAlchemy persistence and storage exceptions."""
