"""Operation registry and dispatch for docforge tools."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from ...core.exceptions import InvalidArgumentsError
from ...core.result import OperationResult
from ...core.utils import get_logger
from .interfaces import BaseTool, OperationContext

LOGGER = get_logger("docforge.dispatch")


class ToolRegistry:
    """Read-only mapping of operation names to tool classes.

    The registry is built once from a closed set of tools; there is no way to
    add or replace an entry afterwards.
    """

    def __init__(self, tools: Iterable[type[BaseTool]]) -> None:
        table: dict[str, type[BaseTool]] = {}
        for tool_class in tools:
            if tool_class.name in table:
                raise ValueError(f"Tool '{tool_class.name}' is already registered")
            table[tool_class.name] = tool_class
        self._tools: Mapping[str, type[BaseTool]] = MappingProxyType(table)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[type[BaseTool]]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def tools(self) -> Mapping[str, type[BaseTool]]:
        return self._tools

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def get(self, name: str) -> type[BaseTool] | None:
        return self._tools.get(name)

    def create(self, name: str, context: OperationContext) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Tool '{name}' is not registered") from exc
        return tool_class(context)

    def descriptors(self) -> list[dict[str, Any]]:
        return [tool_class.descriptor() for tool_class in self._tools.values()]

    def dispatch(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
        *,
        context: OperationContext | None = None,
    ) -> OperationResult:
        """Look up ``name``, shape-check ``arguments`` and run the tool.

        Lookup and argument failures come back as failed results; everything
        after that is the tool's own responsibility.
        """

        tool_class = self._tools.get(name)
        if tool_class is None:
            LOGGER.warning("Unknown tool requested: %s", name)
            return OperationResult.fail(f"Unknown tool: {name}")

        if arguments is None:
            return OperationResult.fail(f"Invalid arguments for {name}: no arguments provided")

        try:
            request = tool_class.request_type.from_arguments(arguments)
        except InvalidArgumentsError as exc:
            LOGGER.warning("Invalid arguments for %s: %s", name, exc)
            return OperationResult.fail(f"Invalid arguments for {name}: {exc}")

        tool = tool_class(context or OperationContext())
        LOGGER.info("Running %s", name)
        return tool.execute(request)


__all__ = ["ToolRegistry"]
