"""
Ward API services
"""

from .ward_client import WardClient, WARD_CONTENT_TYPE

__all__ = ["WardClient", "WARD_CONTENT_TYPE"]
