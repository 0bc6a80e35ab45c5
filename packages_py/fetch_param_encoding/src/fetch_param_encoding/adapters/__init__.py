"""
Adapters for fetch_param_encoding.
"""
from .httpx_adapter import from_httpx_request, to_httpx_request

__all__ = ["to_httpx_request", "from_httpx_request"]
