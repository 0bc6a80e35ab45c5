"""
Multipart/form-data composite parameters.
"""
import logging
from typing import Optional, Sequence, Tuple

from .base import MultipartEncoder, ParametersEncoder
from ..config import CONTENT_TYPE_MULTIPART, EncoderConfig, resolve_config, validate_boundary
from ..core.fragment_builder import MultipartFragmentBuilder
from ..types import OutboundRequest

logger = logging.getLogger("fetch_param_encoding.encoders.multipart")


class MultipartBodyParameters(ParametersEncoder):
    """
    Compose multipart sections into a multipart/form-data body.

    Each call draws a fresh boundary token from the configured factory.
    Sections are framed as ``--<boundary>\\r\\n<part>\\r\\n`` in sequence
    order. No closing ``--<boundary>--`` line is written.

    If any part fails to render, its error is raised and the request is
    left as it was.
    """

    def __init__(
        self,
        multiparts: Sequence[MultipartEncoder],
        config: Optional[EncoderConfig] = None,
    ):
        self._multiparts: Tuple[MultipartEncoder, ...] = tuple(multiparts)
        self._config = resolve_config(config)

    @property
    def multiparts(self) -> Tuple[MultipartEncoder, ...]:
        return self._multiparts

    def encode_parameters(self, request: OutboundRequest) -> OutboundRequest:
        boundary = validate_boundary(self._config.boundary_factory())

        builder = MultipartFragmentBuilder()
        for part in self._multiparts:
            builder.append_part(boundary, part.encode_multipart())

        body = builder.build()
        logger.debug(
            f"MultipartBodyParameters.encode_parameters: boundary={boundary}, "
            f"parts={len(self._multiparts)}, body_size={len(body)}"
        )
        return request.with_header(
            "Content-Type", f"{CONTENT_TYPE_MULTIPART}; boundary={boundary}"
        ).with_body(body)

    def __repr__(self) -> str:
        return f"MultipartBodyParameters(parts={list(self._multiparts)!r})"
