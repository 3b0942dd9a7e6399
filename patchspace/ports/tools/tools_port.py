"""
Port for the workspace tool surface an agent calls, independent of the transport.
"""

from abc import ABC, abstractmethod
from typing import Any, TypedDict


class ToolSpec(TypedDict):
    """Name, description and JSON Schema of one workspace tool."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema, camelCase properties


class ToolsHandlerPort(ABC):
    """
    Port interface for running workspace tools against one session.

    ``run`` returns the structured result; ``dispatch`` returns the same
    result serialized for a function-call reply.
    """

    @abstractmethod
    def available_tools(self) -> list[ToolSpec]:
        """Tool specifications in a stable order."""
        pass

    @abstractmethod
    def run(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Validate arguments and run a tool.

        Args:
            name: Tool name such as ``edit_file``
            arguments: Raw camelCase arguments from the agent

        Returns:
            ``{"success": True, ...}`` or ``{"success": False, "error": ...}``

        Raises:
            ValueError: If the tool name is unknown
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Run a tool and JSON-encode its result.

        Raises:
            ValueError: If the tool name is unknown
        """
        pass
