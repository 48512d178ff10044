"""
Core package - shared, dependency-free utilities.
"""
