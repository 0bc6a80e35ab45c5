"""
Shared fixtures for fetch_param_encoding tests.
"""
from dataclasses import dataclass

import pytest

from fetch_param_encoding.config import EncoderConfig
from fetch_param_encoding.types import OutboundRequest

FIXED_BOUNDARY = "TEST-BOUNDARY-0001"


@dataclass
class SamplePayload:
    """Typed JSON payload used across tests."""

    test: str


@pytest.fixture
def base_url():
    return "http://test.com"


@pytest.fixture
def base_request(base_url):
    """Request with a URL and no headers or body."""
    return OutboundRequest.create(url=base_url)


@pytest.fixture
def empty_request():
    """Request without a URL."""
    return OutboundRequest.create()


@pytest.fixture
def image_data():
    return b"This is image"


@pytest.fixture
def fixed_boundary():
    return FIXED_BOUNDARY


@pytest.fixture
def fixed_boundary_config(fixed_boundary):
    """Config that always yields the same boundary token."""
    return EncoderConfig(boundary_factory=lambda: fixed_boundary)


@pytest.fixture
def sample_payload():
    return SamplePayload(test="test")
