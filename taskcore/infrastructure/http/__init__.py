# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .httpx_client import HttpxClient
from .interfaces import HttpClient, HttpClientBase, HttpMethod, HttpRequest, HttpResponse
from .resilient_client import CircuitBreaker, CircuitOpenError, ResilientHttpClient

__all__ = [
    "CircuitBreaker",
    "CircuitOpenError",
    "HttpClient",
    "HttpClientBase",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ResilientHttpClient",
]
