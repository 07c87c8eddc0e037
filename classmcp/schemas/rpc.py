"""JSON-RPC 2.0 envelopes for the stdio protocol."""
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field

RequestId = Union[int, str]

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
RESOURCE_NOT_FOUND = -32002


class JsonRpcRequest(BaseModel):
    jsonrpc: Literal["2.0"]
    id: Optional[RequestId] = None
    method: str
    params: Dict[str, Any] = Field(default_factory=dict)


class ToolCallParams(BaseModel):
    name: str
    arguments: Optional[Dict[str, Any]] = None


class ReadResourceParams(BaseModel):
    uri: str


class RpcError(Exception):
    """Raised by method handlers; becomes a JSON-RPC error response."""
    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


def result_response(request_id: Optional[RequestId], result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def error_response(request_id: Optional[RequestId], error: RpcError) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "error": error.to_dict()}
