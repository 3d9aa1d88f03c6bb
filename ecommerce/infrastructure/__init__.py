"""Infrastructure layer - adapters, event bus, database, logging."""
