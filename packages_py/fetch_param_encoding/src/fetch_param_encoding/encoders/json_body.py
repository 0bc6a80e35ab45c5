"""
JSON body parameters.
"""
import logging
from typing import Generic, Optional, TypeVar

from .base import MultipartEncoder, ParametersEncoder
from ..config import CONTENT_TYPE_JSON, EncoderConfig, resolve_config
from ..core.fragment_builder import MultipartFragmentBuilder, content_disposition
from ..types import OutboundRequest, ParameterEncodingError

logger = logging.getLogger("fetch_param_encoding.encoders.json_body")

T = TypeVar("T")


class JSONBodyParameters(ParametersEncoder, MultipartEncoder, Generic[T]):
    """
    Encode a JSON-serializable value as the request body.

    Also usable as a multipart section when constructed with a
    ``multipart_name``.

    Args:
        parameters: Value to serialize (dicts, lists, scalars, dataclasses).
        multipart_name: Form field name used only in multipart context.
        config: Optional encoder configuration (serializer, pretty indent).
    """

    def __init__(
        self,
        parameters: T,
        multipart_name: Optional[str] = None,
        config: Optional[EncoderConfig] = None,
    ):
        self._parameters = parameters
        self._multipart_name = multipart_name
        self._config = resolve_config(config)

    @property
    def parameters(self) -> T:
        return self._parameters

    @property
    def multipart_name(self) -> Optional[str]:
        return self._multipart_name

    def encode_parameters(self, request: OutboundRequest) -> OutboundRequest:
        body = self._config.serializer.serialize(self._parameters)
        logger.debug(f"JSONBodyParameters.encode_parameters: body_size={len(body)}")
        return request.with_header("Content-Type", CONTENT_TYPE_JSON).with_body(body)

    def encode_multipart(self) -> bytes:
        if not self._multipart_name:
            raise ParameterEncodingError.multipart_name_missing("JSONBodyParameters")

        payload = self._config.serializer.serialize(self._parameters)
        logger.debug(
            f"JSONBodyParameters.encode_multipart: name={self._multipart_name}, "
            f"payload_size={len(payload)}"
        )
        return (
            MultipartFragmentBuilder()
            .append_header("Content-Disposition", content_disposition(self._multipart_name))
            .append_header("Content-Type", CONTENT_TYPE_JSON)
            .append_blank_line()
            .append_payload(payload)
            .build()
        )

    @property
    def log_description(self) -> Optional[str]:
        try:
            return self._config.serializer.serialize_pretty(
                self._parameters, self._config.pretty_indent
            )
        except Exception as e:
            logger.debug(f"JSONBodyParameters.log_description: not serializable: {e}")
            return None

    def __repr__(self) -> str:
        return (
            f"JSONBodyParameters(parameters={type(self._parameters).__name__}, "
            f"multipart_name={self._multipart_name!r})"
        )
