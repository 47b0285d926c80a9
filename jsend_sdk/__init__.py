"""
jsend_sdk
─────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from jsend_sdk.tier0_core.envelope import Envelope, Status, is_envelope, parse_envelope
from jsend_sdk.tier0_core.errors import (
    JSendError,
    ConfigurationError,
    EnvelopeRejected,
    FailResponse,
    ErrorResponse,
)
from jsend_sdk.tier0_core.config import get_config, load_config, JSendConfig
from jsend_sdk.tier0_core.http import HTTP, Request, RawResponse, TransportFailure
from jsend_sdk.tier0_core.logging import get_logger

from jsend_sdk.tier1_runtime.classify import classify_success, classify_failure
from jsend_sdk.tier1_runtime.context import RequestContext, get_context, set_context, new_context
from jsend_sdk.tier1_runtime.hooks import alert_hook
from jsend_sdk.tier1_runtime.urls import make_url

from jsend_sdk.tier3_platform.transport import HttpxTransport, MockTransport, get_transport
from jsend_sdk.tier3_platform.client import BoundRequest, JSendClient, get_client, jsend

__version__ = "0.1.0"
__all__ = [
    # envelope
    "Envelope", "Status", "is_envelope", "parse_envelope",
    # errors
    "JSendError", "ConfigurationError", "EnvelopeRejected",
    "FailResponse", "ErrorResponse",
    # config
    "get_config", "load_config", "JSendConfig",
    # http
    "HTTP", "Request", "RawResponse", "TransportFailure",
    # logging
    "get_logger",
    # classify
    "classify_success", "classify_failure",
    # context
    "RequestContext", "get_context", "set_context", "new_context",
    # hooks
    "alert_hook",
    # urls
    "make_url",
    # transport
    "HttpxTransport", "MockTransport", "get_transport",
    # client
    "JSendClient", "BoundRequest", "get_client", "jsend",
]
