"""
Core functionality for the council question archive.
"""
