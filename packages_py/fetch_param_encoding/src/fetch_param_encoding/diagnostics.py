"""
Diagnostic rendering of encoder parameters and encoded requests.

Descriptions are for humans only and never affect the wire format. None of
these helpers raise on a missing description.
"""
import logging
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from .encoders.base import ParametersEncoder
from .encoders.json_body import JSONBodyParameters
from .types import OutboundRequest

logger = logging.getLogger("fetch_param_encoding.diagnostics")

NO_DESCRIPTION = "<no description available>"
SENSITIVE_HEADERS = ("authorization", "x-api-key")


def _mask_header_value(value: str, visible_chars: int = 15) -> str:
    """Mask header value for safe logging."""
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with auth headers masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = _mask_header_value(masked[key])
    return masked


def describe_parameters(encoder: ParametersEncoder) -> str:
    """Get the encoder's description, or NO_DESCRIPTION."""
    description = encoder.log_description
    if description is None:
        return NO_DESCRIPTION
    return description


def log_parameters(
    encoder: ParametersEncoder,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log the encoder's description at debug level."""
    log = logger or logging.getLogger("fetch_param_encoding.diagnostics")
    if not log.isEnabledFor(logging.DEBUG):
        return
    log.debug(f"{type(encoder).__name__}:\n{describe_parameters(encoder)}")


def print_parameters(
    encoder: ParametersEncoder,
    console: Optional[Console] = None,
    title: Optional[str] = None,
) -> None:
    """Print the encoder's description in a panel. JSON is syntax highlighted."""
    console = console or Console()
    title = title or f"[bold]{type(encoder).__name__}[/bold]"
    description = encoder.log_description

    if description is not None and isinstance(encoder, JSONBodyParameters):
        renderable = Syntax(description, "json", theme="monokai")
        console.print(Panel(renderable, title=title, expand=True))
    else:
        console.print(Panel(Text(describe_parameters(encoder)), title=title))


def format_request_summary(request: OutboundRequest) -> str:
    """Summarize an encoded request: URL, masked headers, body size."""
    lines = [f"URL: {request.url if request.url is not None else '<none>'}"]
    for name, value in mask_headers(dict(request.headers.items())).items():
        lines.append(f"{name}: {value}")
    body_size = len(request.body) if request.body is not None else 0
    lines.append(f"Body: {body_size} bytes")
    return "\n".join(lines)
