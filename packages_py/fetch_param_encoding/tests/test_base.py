"""
Tests for encoders/base.py
Logic testing: Path coverage
"""
import logging

import httpx
import pytest

from fetch_param_encoding.encoders.base import ParametersEncoder, apply_parameters
from fetch_param_encoding.encoders.json_body import JSONBodyParameters
from fetch_param_encoding.encoders.query import URLQueryParameters


class TestParametersEncoder:
    """Tests for the ParametersEncoder interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            ParametersEncoder()

    # Path: log_description defaults to None
    def test_default_log_description(self, base_request):
        class PassThrough(ParametersEncoder):
            def encode_parameters(self, request):
                return request

        assert PassThrough().log_description is None


class TestApplyParameters:
    """Tests for apply_parameters function."""

    # Boundary: no encoders
    def test_no_encoders(self, base_request):
        assert apply_parameters(base_request, []) is base_request

    # Path: query and JSON body accumulate
    def test_accumulates(self, base_request):
        result = apply_parameters(
            base_request,
            [URLQueryParameters({"page": 1}), JSONBodyParameters({"name": "test"})],
        )

        assert result.url.params["page"] == "1"
        assert result.header("Content-Type") == "application/json"
        assert result.body == b'{"name":"test"}'
        assert base_request.body is None

    # Decision: later encoders win on the same header
    def test_later_encoder_wins(self, base_request):
        result = apply_parameters(
            base_request,
            [JSONBodyParameters({"a": 1}), JSONBodyParameters({"b": 2})],
        )

        assert result.body == b'{"b":2}'

    # Decision: errors propagate
    def test_error_propagates(self, empty_request):
        with pytest.raises(httpx.InvalidURL):
            apply_parameters(empty_request, [URLQueryParameters({"a": 1})])

    # Path: descriptions logged at debug
    def test_logs_descriptions(self, base_request, caplog):
        with caplog.at_level(logging.DEBUG, logger="fetch_param_encoding.encoders"):
            apply_parameters(base_request, [URLQueryParameters({"page": 1})])

        assert "URLQueryParameters" in caplog.text
        assert "page = 1" in caplog.text
