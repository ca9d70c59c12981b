"""
NumPy-backed implementations of the tensorcheck contracts.
"""
