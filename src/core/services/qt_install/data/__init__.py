"""
L0 Data — constants used across the Qt install layers.
"""
