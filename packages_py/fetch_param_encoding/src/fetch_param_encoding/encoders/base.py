"""
Encoder interfaces for fetch_param_encoding.

Two orthogonal capabilities:
- ParametersEncoder: attaches body/headers to a whole outbound request.
- MultipartEncoder: renders one entity as a multipart/form-data section.

A value type may implement both (see JSONBodyParameters, ImageParameter).
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..types import OutboundRequest

logger = logging.getLogger("fetch_param_encoding.encoders")


class ParametersEncoder(ABC):
    """Request-level parameter encoder interface."""

    @abstractmethod
    def encode_parameters(self, request: OutboundRequest) -> OutboundRequest:
        """
        Attach the parameters to a request.

        Args:
            request: Request to encode into. Never mutated.

        Returns:
            A new OutboundRequest carrying the encoded parameters.
        """
        ...

    @property
    def log_description(self) -> Optional[str]:
        """Human-readable description for diagnostics, or None."""
        return None


class MultipartEncoder(ABC):
    """Multipart section renderer interface."""

    @abstractmethod
    def encode_multipart(self) -> bytes:
        """
        Render header lines, a blank line, then the payload.

        Raises:
            ParameterEncodingError: If the part has no multipart name.
        """
        ...


def apply_parameters(
    request: OutboundRequest,
    encoders: Iterable[ParametersEncoder],
) -> OutboundRequest:
    """Apply encoders to a request in order and return the final request."""
    result = request
    for encoder in encoders:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"apply_parameters: encoder={type(encoder).__name__}, "
                f"description={encoder.log_description!r}"
            )
        result = encoder.encode_parameters(result)
    return result
