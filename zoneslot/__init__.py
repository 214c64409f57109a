"""
zoneslot - interval algebra and cross-timezone business-hours scheduling.
"""

__version__ = "0.1.0"
