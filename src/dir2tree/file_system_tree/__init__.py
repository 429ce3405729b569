"""File system tree construction and rendering.

This package provides the tree builder that lists, filters, sorts and renders
directory hierarchies, along with the entry and node types it produces.
"""
