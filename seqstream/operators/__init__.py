"""
Pull-based (Volcano-style) sequence operators

Each operator is an iterable node in a tree; iterating the root pulls
elements through the tree on demand.
"""
