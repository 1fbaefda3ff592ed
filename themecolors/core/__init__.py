"""Color resolution engine."""
