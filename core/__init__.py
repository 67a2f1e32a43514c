"""
Core package init for the planar image toolkit.
Exposes public modules for import in tests and callers.
"""
__all__ = ["image", "indexing", "traversal", "color_processing", "transforms"]
