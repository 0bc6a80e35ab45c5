"""
Configuration for fetch_param_encoding.
"""
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Optional, Union
import json
import logging
import uuid

from .types import BoundaryFactory, Serializer

logger = logging.getLogger("fetch_param_encoding.config")

# Default values
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_IMAGE = "image/jpeg"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CRLF = b"\r\n"
DEFAULT_PRETTY_INDENT = 2


def _to_jsonable(value: Any) -> Any:
    """Fallback hook for json.dumps: dataclass instances become dicts."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class DefaultSerializer:
    """Default JSON serializer.

    ``serialize`` produces the compact wire form, ``serialize_pretty`` the
    indented form used for diagnostics. Both raise the codec's own errors
    (TypeError / ValueError) for values JSON cannot represent.
    """

    def serialize(self, data: Any) -> bytes:
        """Serialize data to compact JSON bytes."""
        return json.dumps(
            data,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_to_jsonable,
        ).encode("utf-8")

    def serialize_pretty(self, data: Any, indent: int = DEFAULT_PRETTY_INDENT) -> str:
        """Serialize data to indented JSON text."""
        return json.dumps(
            data,
            indent=indent,
            ensure_ascii=False,
            allow_nan=False,
            default=_to_jsonable,
        )

    def deserialize(self, text: Union[str, bytes]) -> Any:
        """Deserialize JSON string or bytes to data."""
        return json.loads(text)


default_serializer = DefaultSerializer()


def default_boundary_factory() -> str:
    """Generate a fresh multipart boundary token."""
    return str(uuid.uuid4())


def validate_boundary(token: str) -> str:
    """Validate a boundary token before it is written into headers and body."""
    if not token:
        raise ValueError("multipart boundary must not be empty")
    if "\r" in token or "\n" in token:
        raise ValueError(f"multipart boundary must not contain line breaks: {token!r}")
    return token


@dataclass
class EncoderConfig:
    """Encoder configuration."""

    serializer: Optional[Serializer] = None
    boundary_factory: Optional[BoundaryFactory] = None
    pretty_indent: int = DEFAULT_PRETTY_INDENT


@dataclass
class ResolvedEncoderConfig:
    """Encoder configuration with defaults applied."""

    serializer: Serializer = field(default_factory=lambda: default_serializer)
    boundary_factory: BoundaryFactory = default_boundary_factory
    pretty_indent: int = DEFAULT_PRETTY_INDENT


def validate_config(config: EncoderConfig) -> None:
    """Validate encoder configuration."""
    if config.pretty_indent < 0:
        raise ValueError(f"pretty_indent must be >= 0, got {config.pretty_indent}")
    if config.boundary_factory is not None and not callable(config.boundary_factory):
        raise ValueError("boundary_factory must be callable")


def resolve_config(config: Optional[EncoderConfig] = None) -> ResolvedEncoderConfig:
    """Resolve encoder configuration with defaults."""
    if config is None:
        return ResolvedEncoderConfig()

    validate_config(config)
    logger.debug(
        f"resolve_config: custom_serializer={config.serializer is not None}, "
        f"custom_boundary_factory={config.boundary_factory is not None}, "
        f"pretty_indent={config.pretty_indent}"
    )
    return ResolvedEncoderConfig(
        serializer=config.serializer or default_serializer,
        boundary_factory=config.boundary_factory or default_boundary_factory,
        pretty_indent=config.pretty_indent,
    )
