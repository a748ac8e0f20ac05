"""Shared HTTP plumbing for remote resource clients."""

from src.infrastructure.http.base_api_client import BaseResourceAPIClient
from src.infrastructure.http.request_spec import RequestSpec

__all__ = [
    "BaseResourceAPIClient",
    "RequestSpec",
]
