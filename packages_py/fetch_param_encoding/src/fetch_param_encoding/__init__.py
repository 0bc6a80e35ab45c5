"""
Request parameter encoding for Python HTTP clients.

Encodes typed parameters into an outbound request as a JSON body, a URL
query string, a raw image body, or a multipart/form-data payload.
"""
from .types import (
    BoundaryFactory,
    OutboundRequest,
    ParameterEncodingError,
    ParameterEncodingErrorCode,
    Serializer,
)
from .config import (
    CONTENT_TYPE_IMAGE,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    DefaultSerializer,
    EncoderConfig,
    default_boundary_factory,
    resolve_config,
)
from .core.fragment_builder import MultipartFragmentBuilder, content_disposition
from .encoders.base import MultipartEncoder, ParametersEncoder, apply_parameters
from .encoders.json_body import JSONBodyParameters
from .encoders.query import URLQueryParameters
from .encoders.image import ImageParameter
from .encoders.multipart import MultipartBodyParameters
from .adapters.httpx_adapter import from_httpx_request, to_httpx_request
from .diagnostics import (
    NO_DESCRIPTION,
    describe_parameters,
    format_request_summary,
    log_parameters,
    print_parameters,
)

__all__ = [
    # Types
    "BoundaryFactory",
    "OutboundRequest",
    "ParameterEncodingError",
    "ParameterEncodingErrorCode",
    "Serializer",
    # Config
    "CONTENT_TYPE_IMAGE",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_MULTIPART",
    "DefaultSerializer",
    "EncoderConfig",
    "default_boundary_factory",
    "resolve_config",
    # Multipart framing
    "MultipartFragmentBuilder",
    "content_disposition",
    # Encoders
    "ParametersEncoder",
    "MultipartEncoder",
    "apply_parameters",
    "JSONBodyParameters",
    "URLQueryParameters",
    "ImageParameter",
    "MultipartBodyParameters",
    # Adapters
    "to_httpx_request",
    "from_httpx_request",
    # Diagnostics
    "NO_DESCRIPTION",
    "describe_parameters",
    "format_request_summary",
    "log_parameters",
    "print_parameters",
]

__version__ = "0.1.0"
