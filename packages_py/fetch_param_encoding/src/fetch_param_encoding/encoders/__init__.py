"""
Parameter encoders for fetch_param_encoding.
"""
from .base import MultipartEncoder, ParametersEncoder, apply_parameters
from .image import ImageParameter
from .json_body import JSONBodyParameters
from .multipart import MultipartBodyParameters
from .query import URLQueryParameters

__all__ = [
    "ParametersEncoder",
    "MultipartEncoder",
    "apply_parameters",
    "JSONBodyParameters",
    "URLQueryParameters",
    "ImageParameter",
    "MultipartBodyParameters",
]
