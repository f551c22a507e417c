"""Console entry point for the pattern demos."""
