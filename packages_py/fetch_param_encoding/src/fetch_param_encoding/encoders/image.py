"""
Binary image parameter.
"""
import logging
from typing import Optional

from .base import MultipartEncoder, ParametersEncoder
from ..config import CONTENT_TYPE_IMAGE
from ..core.fragment_builder import MultipartFragmentBuilder, content_disposition
from ..types import OutboundRequest, ParameterEncodingError

logger = logging.getLogger("fetch_param_encoding.encoders.image")


class ImageParameter(ParametersEncoder, MultipartEncoder):
    """
    Raw image bytes as a request body or a multipart file section.

    The content type is always image/jpeg; the bytes are not inspected.
    As a request body, exactly one image is sent and any previous body
    and Content-Type are overwritten.
    """

    def __init__(
        self,
        image: bytes,
        filename: str,
        multipart_name: Optional[str] = None,
    ):
        self._image = bytes(image)
        self._filename = filename
        self._multipart_name = multipart_name

    @property
    def image(self) -> bytes:
        return self._image

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def multipart_name(self) -> Optional[str]:
        return self._multipart_name

    def encode_parameters(self, request: OutboundRequest) -> OutboundRequest:
        logger.debug(
            f"ImageParameter.encode_parameters: filename={self._filename}, "
            f"size={len(self._image)}"
        )
        return request.with_header("Content-Type", CONTENT_TYPE_IMAGE).with_body(self._image)

    def encode_multipart(self) -> bytes:
        if not self._multipart_name:
            raise ParameterEncodingError.multipart_name_missing(
                f"ImageParameter(filename={self._filename!r})"
            )

        return (
            MultipartFragmentBuilder()
            .append_header(
                "Content-Disposition",
                content_disposition(self._multipart_name, self._filename),
            )
            .append_header("Content-Type", CONTENT_TYPE_IMAGE)
            .append_blank_line()
            .append_payload(self._image)
            .build()
        )

    @property
    def log_description(self) -> Optional[str]:
        return f"<image: {len(self._image)} bytes>"

    def __repr__(self) -> str:
        return (
            f"ImageParameter(filename={self._filename!r}, size={len(self._image)}, "
            f"multipart_name={self._multipart_name!r})"
        )
