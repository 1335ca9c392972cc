"""
HTTP API for VisionGrid
"""
