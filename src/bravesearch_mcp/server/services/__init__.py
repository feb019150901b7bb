# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Capability service implementations for MCPServer."""

from __future__ import annotations

from .tools import ToolsService


__all__ = ["ToolsService"]
