"""
JSON-RPC 2.0 method dispatch for the classmcp server.

Messages arrive already decoded from JSON. Requests get a response dict,
notifications (messages without an "id") get None even when they fail.
"""
import logging
from typing import Any, Callable, Dict, Optional
from pydantic import ValidationError
from classmcp.api.resources import ResourceNotFoundError, list_resources, read_resource
from classmcp.core.config import settings
from classmcp.schemas.rpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    RESOURCE_NOT_FOUND,
    JsonRpcRequest,
    ReadResourceParams,
    RpcError,
    ToolCallParams,
    error_response,
    result_response,
)
from classmcp.tools.registry import ToolRegistry

log = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"


def _describe_validation_error(e: ValidationError) -> str:
    problems = []
    for err in e.errors():
        path = ".".join(str(part) for part in err["loc"])
        problems.append(f"{path}: {err['msg']}" if path else err["msg"])
    return "; ".join(problems)


class Dispatcher:
    def __init__(self, session, tools: Optional[ToolRegistry] = None):
        self.session = session
        self.tools = tools or ToolRegistry.default()
        self._methods: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
            "resources/list": self._list_resources,
            "resources/read": self._read_resource,
        }

    def handle(self, message: Any) -> Optional[Dict[str, Any]]:
        is_notification = isinstance(message, dict) and "id" not in message
        request_id = message.get("id") if isinstance(message, dict) else None

        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError as e:
            if is_notification:
                return None
            error = RpcError(INVALID_REQUEST, "Invalid Request", _describe_validation_error(e))
            return error_response(request_id if isinstance(request_id, (int, str)) else None, error)

        try:
            result = self._dispatch(request)
        except RpcError as e:
            if is_notification:
                log.warning("Notification %s failed: %s", request.method, e.message)
                return None
            return error_response(request.id, e)
        except Exception as e:
            tool = request.params.get("name", "-") if request.method == "tools/call" else "-"
            log.exception("Unhandled error in %s", request.method, extra={"tool": tool})
            if is_notification:
                return None
            return error_response(request.id, RpcError(INTERNAL_ERROR, f"Internal error: {e}"))

        if is_notification:
            return None
        return result_response(request.id, result)

    def _dispatch(self, request: JsonRpcRequest) -> Dict[str, Any]:
        if request.method.startswith("notifications/"):
            return {}
        handler = self._methods.get(request.method)
        if handler is None:
            raise RpcError(METHOD_NOT_FOUND, f"Method not found: {request.method}")
        return handler(request.params)

    def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        log.info("Client initialized: %s", params.get("clientInfo", {}).get("name", "unknown"))
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}, "resources": {}},
            "serverInfo": {"name": settings.app_name, "version": settings.app_version},
        }

    def _ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    def _list_tools(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"tools": self.tools.describe()}

    def _call_tool(self, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            call = ToolCallParams.model_validate(params)
        except ValidationError as e:
            raise RpcError(INVALID_PARAMS, "Invalid params", _describe_validation_error(e))

        tool = self.tools.get(call.name)
        if tool is None:
            log.warning("Unknown tool requested: %s", call.name, extra={"tool": call.name})
            return {"content": [{"type": "text", "text": f"Unknown tool: {call.name}"}], "isError": True}

        try:
            args = tool.parse_args(call.arguments)
        except ValidationError as e:
            log.info("Invalid arguments for %s", call.name, extra={"tool": call.name})
            result = tool.result(f"Invalid arguments for {call.name}: {_describe_validation_error(e)}", is_error=True)
            return result.to_content()

        log.debug("Running tool", extra={"tool": call.name, "framework": self.session.current_framework})
        return tool.run(self.session, args).to_content()

    def _list_resources(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {"resources": list_resources(self.session)}

    def _read_resource(self, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            read = ReadResourceParams.model_validate(params)
        except ValidationError as e:
            raise RpcError(INVALID_PARAMS, "Invalid params", _describe_validation_error(e))
        try:
            return read_resource(self.session, read.uri)
        except ResourceNotFoundError as e:
            raise RpcError(RESOURCE_NOT_FOUND, str(e), {"uri": e.uri})
