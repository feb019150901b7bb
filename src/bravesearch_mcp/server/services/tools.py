# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Tool capability service."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from mcp import types
from pydantic import BaseModel, ValidationError

from ..adapters import error_result, normalize_tool_result
from ...errors import InvalidParamsError
from ...tool import ToolSpec


class ToolsService:
    """Keeps tool definitions and dispatches ``tools/call`` requests."""

    def __init__(self, *, logger: logging.Logger) -> None:
        self._logger = logger
        self._tool_specs: dict[str, ToolSpec] = {}
        self._tool_defs: dict[str, types.Tool] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def tool_names(self) -> list[str]:
        return sorted(self._tool_defs)

    @property
    def definitions(self) -> dict[str, types.Tool]:
        return self._tool_defs

    def register(self, spec: ToolSpec) -> ToolSpec:
        self._tool_specs[spec.name] = spec
        self._tool_defs[spec.name] = self._build_definition(spec)
        self._logger.debug("registered tool %s", spec.name)
        return spec

    async def list_tools(self) -> list[types.Tool]:
        return list(self._tool_defs.values())

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        spec = self._tool_specs.get(name)
        if spec is None:
            return error_result(f'Tool "{name}" is not available')

        try:
            arguments = spec.input_model.model_validate(arguments).model_dump()
        except ValidationError as exc:
            return error_result(str(InvalidParamsError.from_validation_error(exc)))

        try:
            result = spec.fn(**arguments)
        except TypeError as exc:  # argument mismatch
            return error_result(f"Invalid arguments: {exc}")
        if inspect.isawaitable(result):
            result = await result

        return normalize_tool_result(result)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_definition(self, spec: ToolSpec) -> types.Tool:
        return types.Tool(
            name=spec.name,
            description=spec.description or None,
            inputSchema=_input_schema_for(spec.input_model),
        )


def _input_schema_for(model: type[BaseModel]) -> dict[str, Any]:
    schema = model.model_json_schema()
    _prune_titles(schema)
    return schema


def _prune_titles(schema: Any) -> None:
    if isinstance(schema, dict):
        schema.pop("title", None)
        for key, value in schema.items():
            if key == "properties" and isinstance(value, dict):
                for prop in value.values():
                    _prune_titles(prop)
            else:
                _prune_titles(value)
    elif isinstance(schema, list):
        for item in schema:
            _prune_titles(item)

