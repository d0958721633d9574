"""HTTP host for the classification engine."""
