# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Public server-side surface.

The heavy lifting lives in :mod:`bravesearch_mcp.server.app`; this module
re-exports what host code is expected to import.
"""

from __future__ import annotations

from .app import MCPServer


__all__ = [
    "MCPServer",
]
