"""Infrastructure layer: static data sources."""
