"""Observability utilities and metrics."""

from .metrics import (api_request_duration, api_request_failures, api_requests, resource_operation_failures, resource_operations, resource_processing_time, token_refresh_failures, token_refreshes,
                      tool_cleanup_failures, tools_deleted, tools_imported)

__all__ = [
    # Authentication metrics
    "token_refreshes",
    "token_refresh_failures",
    # API metrics
    "api_requests",
    "api_request_failures",
    "api_request_duration",
    # Resource metrics
    "resource_operations",
    "resource_operation_failures",
    "resource_processing_time",
    # Tool metrics
    "tools_imported",
    "tools_deleted",
    "tool_cleanup_failures",
]
