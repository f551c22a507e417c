"""HTTP surface for the pattern demos."""
