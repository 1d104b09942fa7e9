"""Infrastructure layer - engine lifecycle and logging."""
