"""
VisionGrid - typed pixel grids with colorspace and geometry transforms.
"""

__version__ = "0.1.0"
