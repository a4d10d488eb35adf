"""Infrastructure layer: config file persistence and git subprocess helpers."""
