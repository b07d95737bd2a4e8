"""Progress services."""
