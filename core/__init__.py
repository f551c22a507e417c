"""Shared plumbing for the pattern demos: narration, logging, demo registry."""
