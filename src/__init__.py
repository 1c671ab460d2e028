"""
install-qt-action — install Qt on a CI runner via aqtinstall.
"""

__version__ = "4.0.0"
