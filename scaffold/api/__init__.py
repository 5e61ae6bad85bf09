"""HTTP assembly for generated modules."""
