"""
httpx adapter for OutboundRequest.

Converts encoded requests to and from httpx.Request so they can be sent
through any httpx.Client / httpx.AsyncClient the caller owns.
"""
import logging

import httpx

from ..types import OutboundRequest

logger = logging.getLogger("fetch_param_encoding.adapters.httpx")


def to_httpx_request(request: OutboundRequest, method: str = "POST") -> httpx.Request:
    """
    Build an httpx.Request from an encoded OutboundRequest.

    Args:
        request: Encoded request.
        method: HTTP method to use.

    Returns:
        httpx.Request with the request's URL, headers and body.

    Raises:
        httpx.InvalidURL: If the request has no URL.
    """
    if request.url is None:
        raise httpx.InvalidURL("Cannot build an httpx.Request without a URL")

    logger.debug(
        f"to_httpx_request: method={method}, url={request.url}, "
        f"body_size={len(request.body) if request.body is not None else 0}"
    )
    return httpx.Request(
        method=method.upper(),
        url=request.url,
        headers=request.headers.copy(),
        content=request.body,
    )


def from_httpx_request(request: httpx.Request) -> OutboundRequest:
    """
    Build an OutboundRequest from an httpx.Request, reading its body.

    The body is kept exactly as read, so a request without content yields
    b"". Headers are copied as-is, including the Host and Content-Length
    headers httpx adds when it builds a request.
    """
    return OutboundRequest(
        url=request.url,
        headers=request.headers.copy(),
        body=request.read(),
    )
