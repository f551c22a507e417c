"""Naive counterparts of the patterns.

Each module solves the same scenario as its ``patterns`` sibling without
the pattern, so the demos can show the problem before the fix.
"""
