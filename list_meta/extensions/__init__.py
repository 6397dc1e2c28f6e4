"""
Extensions for list-meta.
"""
