"""
HTTP API layer for Circle Thumbnail Studio
"""
