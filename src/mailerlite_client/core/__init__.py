"""
Core layer - transport pipeline shared by every resource.
"""
from .classifier import classify_response, is_success, parse_error_body
from .dispatcher import AsyncDispatcher, SyncDispatcher, decode_body
from .query_encoder import add_options, encode_body_options, encode_filters, encode_query, to_query_string
from .rate_tracker import RateTracker, parse_rate
from .request_builder import build_body, build_headers, build_url

__all__ = [
    # Dispatch
    "AsyncDispatcher",
    "SyncDispatcher",
    "decode_body",
    # Classification
    "classify_response",
    "is_success",
    "parse_error_body",
    # Query encoding
    "add_options",
    "encode_body_options",
    "encode_filters",
    "encode_query",
    "to_query_string",
    # Rate tracking
    "RateTracker",
    "parse_rate",
    # Request building
    "build_body",
    "build_headers",
    "build_url",
]
