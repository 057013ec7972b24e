"""
Tool registry shared by the stdio server and the HTTP bridge.

Every tool is declared once through ToolRegistry.register (or the task-pattern
helper built on it). The registry is filled at startup and only read afterwards;
both transports list and invoke tools through it.
"""

import json
import logging
import traceback
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    FrozenSet,
    Iterator,
    List,
    Optional,
    Union,
)

from mcp.types import TextContent
from pydantic import BaseModel, ConfigDict

from .clients.base import ProviderError
from .config import Settings
from .utils import metrics
from .utils.schema import to_json_schema

logger = logging.getLogger("dataforseo-mcp-registry")

InputSchema = Union[type, Dict[str, Any]]
Handler = Callable[[Dict[str, Any], Any], Awaitable[Any]]


class DuplicateToolError(ValueError):
    """Raised when a tool name is registered twice"""


class ToolNotFoundError(LookupError):
    """Raised when invoking a name that is not in the registry"""


class NoArguments(BaseModel):
    """Input for tools that take no arguments"""

    model_config = ConfigDict(extra="forbid")


class TaskIdArguments(BaseModel):
    """Input for fetching the result of a submitted task"""

    id: str


@dataclass
class ToolResult:
    content: List[TextContent]
    is_error: bool = False

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls([TextContent(type="text", text=text)], is_error)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "content": [
                item.model_dump(by_alias=True, exclude_none=True)
                for item in self.content
            ]
        }
        if self.is_error:
            result["isError"] = True
        return result


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: InputSchema
    call: Callable[[Dict[str, Any]], Awaitable[ToolResult]]
    module: Optional[str] = None

    def json_schema(self) -> Dict[str, Any]:
        return to_json_schema(self.input_schema, self.name)


@dataclass(frozen=True)
class ToolFilter:
    """
    Startup allow-list. enabled_tools, when set, decides alone; otherwise
    enabled_modules restricts by category.
    """

    enabled_modules: Optional[FrozenSet[str]] = None
    enabled_tools: Optional[FrozenSet[str]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ToolFilter":
        return cls(settings.enabled_modules, settings.enabled_tools)

    def is_module_enabled(self, module: Optional[str]) -> bool:
        if self.enabled_modules is None:
            return True
        return module is not None and module.upper() in self.enabled_modules

    def allows(self, name: str, module: Optional[str] = None) -> bool:
        if self.enabled_tools is not None:
            return name.lower() in self.enabled_tools
        return self.is_module_enabled(module)


def dump_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def error_payload(error: BaseException) -> Dict[str, Any]:
    payload = {"error": str(error) or type(error).__name__}
    if isinstance(error, ProviderError) and error.payload is not None:
        payload["details"] = error.payload
    if error.__traceback__ is not None:
        payload["stack"] = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return payload


def _is_model(schema: InputSchema) -> bool:
    return isinstance(schema, type) and issubclass(schema, BaseModel)


class ToolRegistry:
    def __init__(self, tool_filter: Optional[ToolFilter] = None):
        self.tool_filter = tool_filter or ToolFilter()
        self._tools: Dict[str, ToolDefinition] = {}
        self._declared: set = set()

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(list(self._tools.values()))

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def add(self, definition: ToolDefinition) -> bool:
        """
        Insert a prepared definition

        Returns:
            False when the startup filter excludes the tool, True otherwise

        Raises:
            ValueError: If the name is empty
            DuplicateToolError: If the name is already registered
        """
        if not definition.name:
            raise ValueError("Tool name must not be empty")
        if definition.name in self._declared:
            raise DuplicateToolError(f"Tool already registered: {definition.name}")
        self._declared.add(definition.name)
        if not self.tool_filter.allows(definition.name, definition.module):
            logger.debug(f"Skipping disabled tool: {definition.name}")
            return False

        self._tools[definition.name] = definition
        metrics.registered_tools.set(len(self._tools))
        return True

    def register(
        self,
        name: str,
        input_schema: InputSchema,
        handler: Handler,
        *,
        client: Any,
        module: Optional[str] = None,
        description: str = "",
    ) -> bool:
        """
        Register a tool whose handler receives (params, client)

        The handler's return value is sent back as one text block holding its JSON
        serialisation. Any exception it raises, argument validation errors included,
        is turned into an error text block instead of propagating.
        """

        async def call(arguments: Dict[str, Any]) -> ToolResult:
            try:
                if _is_model(input_schema):
                    params = input_schema.model_validate(arguments or {}).model_dump(
                        by_alias=True, exclude_none=True
                    )
                else:
                    params = dict(arguments or {})
                result = await handler(params, client)
            except Exception as e:
                logger.error(f"Error in {name} tool: {e}")
                metrics.tool_calls_total.labels(tool=name, outcome="error").inc()
                return ToolResult.text(dump_json(error_payload(e)), is_error=True)

            metrics.tool_calls_total.labels(tool=name, outcome="success").inc()
            return ToolResult.text(dump_json(result))

        return self.add(
            ToolDefinition(
                name=name,
                description=description,
                input_schema=input_schema,
                call=call,
                module=module,
            )
        )

    def register_task_tool(
        self,
        base_name: str,
        post_schema: InputSchema,
        post_handler: Handler,
        ready_handler: Callable[[Any], Awaitable[Any]],
        get_handler: Callable[[str, Any], Awaitable[Any]],
        *,
        client: Any,
        module: Optional[str] = None,
        description: str = "",
    ) -> List[str]:
        """
        Register the submit/poll/fetch triple for an asynchronous provider task

        Creates ``<base_name>_post``, ``<base_name>_ready`` (no arguments) and
        ``<base_name>_get`` (a string ``id``). Callers decide how often to poll.

        Returns:
            Names of the tools that passed the startup filter
        """
        subject = description or base_name

        async def ready(_params, bound_client):
            return await ready_handler(bound_client)

        async def fetch(params, bound_client):
            return await get_handler(params["id"], bound_client)

        triple = [
            (
                f"{base_name}_post",
                post_schema,
                post_handler,
                f"{subject}: submit a task. Returns the task id.",
            ),
            (
                f"{base_name}_ready",
                NoArguments,
                ready,
                f"{subject}: list ids of completed tasks ready for collection.",
            ),
            (
                f"{base_name}_get",
                TaskIdArguments,
                fetch,
                f"{subject}: fetch the result of a completed task by id.",
            ),
        ]

        registered = []
        for name, schema, handler, text in triple:
            if self.register(
                name, schema, handler, client=client, module=module, description=text
            ):
                registered.append(name)
        return registered

    def registrar(self, client: Any, module: Optional[str] = None) -> "ToolRegistrar":
        return ToolRegistrar(self, client, module)

    async def invoke(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        definition = self._tools.get(name)
        if definition is None:
            raise ToolNotFoundError(name)
        return await definition.call(arguments or {})


@dataclass
class ToolRegistrar:
    """Registers tools of one category against one provider client"""

    registry: ToolRegistry
    client: Any
    module: Optional[str] = None
    registered: List[str] = field(default_factory=list)

    def tool(
        self,
        name: str,
        input_schema: InputSchema,
        handler: Handler,
        description: str = "",
    ) -> bool:
        added = self.registry.register(
            name,
            input_schema,
            handler,
            client=self.client,
            module=self.module,
            description=description,
        )
        if added:
            self.registered.append(name)
        return added

    def task_tool(
        self,
        base_name: str,
        post_schema: InputSchema,
        post_handler: Handler,
        ready_handler: Callable[[Any], Awaitable[Any]],
        get_handler: Callable[[str, Any], Awaitable[Any]],
        description: str = "",
    ) -> List[str]:
        names = self.registry.register_task_tool(
            base_name,
            post_schema,
            post_handler,
            ready_handler,
            get_handler,
            client=self.client,
            module=self.module,
            description=description,
        )
        self.registered.extend(names)
        return names
