"""Infrastructure layer - logging."""
