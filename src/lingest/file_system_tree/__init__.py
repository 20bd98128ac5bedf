"""Directory listing and tree rendering with ignore and include rules.

This package provides the shared child-ordering rule used by every traversal
and the renderer that turns a filtered directory into a nested text listing.
"""
