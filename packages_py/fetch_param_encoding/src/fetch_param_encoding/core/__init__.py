"""
Core modules for fetch_param_encoding.
"""
from .fragment_builder import MultipartFragmentBuilder, content_disposition

__all__ = [
    "MultipartFragmentBuilder",
    "content_disposition",
]
