"""Normalization helpers for tool handler results.

Tool functions return either plain text or a ready-made ``CallToolResult``;
everything leaves the server as a ``CallToolResult``.
"""

from __future__ import annotations

from typing import Any

from mcp import types

__all__ = ["error_result", "normalize_tool_result"]


def normalize_tool_result(value: Any) -> types.CallToolResult:
    """Coerce tool handler output into ``CallToolResult``."""

    if isinstance(value, types.CallToolResult):
        return value
    return types.CallToolResult(content=[types.TextContent(type="text", text=str(value))])


def error_result(message: str) -> types.CallToolResult:
    """Build the ``isError`` result a model sees when a tool fails."""

    return types.CallToolResult(content=[types.TextContent(type="text", text=message)], isError=True)
