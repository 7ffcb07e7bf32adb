"""Filesystem traversal and tree construction.

This package holds the pieces a tree build is assembled from: the filesystem
access layer, the entry filter, the attribute collector, the callback dispatcher
and the depth-first traverser that drives them.
"""
