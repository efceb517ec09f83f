"""Static data sources."""
