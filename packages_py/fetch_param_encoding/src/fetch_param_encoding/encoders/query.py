"""
URL query parameters.
"""
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .base import ParametersEncoder
from ..types import OutboundRequest

logger = logging.getLogger("fetch_param_encoding.encoders.query")


class URLQueryParameters(ParametersEncoder):
    """
    Encode a key/value mapping as the request URL's query string.

    Values are rendered with ``str()``. Query items follow the mapping's
    insertion order. Any query already on the URL is replaced.
    """

    def __init__(self, parameters: Mapping[str, Any]):
        self._parameters: Dict[str, Any] = dict(parameters)

    @property
    def parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def encode_parameters(self, request: OutboundRequest) -> OutboundRequest:
        if not self._parameters:
            return request

        if request.url is None:
            raise httpx.InvalidURL("Request has no URL to attach query parameters to")

        query_items = [(key, str(value)) for key, value in self._parameters.items()]
        url = request.url.copy_with(params=query_items)
        logger.debug(f"URLQueryParameters.encode_parameters: items={len(query_items)}")
        return request.with_url(url)

    @property
    def log_description(self) -> Optional[str]:
        return "\n".join(f"{key} = {value}" for key, value in self._parameters.items())

    def __repr__(self) -> str:
        return f"URLQueryParameters(keys={list(self._parameters)!r})"
