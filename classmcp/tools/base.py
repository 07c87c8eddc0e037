from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Type
from classmcp.schemas.tools import NoArgs, ToolArgs

@dataclass
class ToolResult:
    tool: str
    text: str
    is_error: bool = False

    def to_content(self) -> Dict[str, Any]:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }

class BaseTool:
    name: str
    description: str
    args_model: Type[ToolArgs] = NoArgs

    def input_schema(self) -> Dict[str, Any]:
        schema = self.args_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def parse_args(self, arguments: Optional[Mapping[str, Any]]) -> ToolArgs:
        return self.args_model.model_validate(dict(arguments or {}))

    def result(self, text: str, is_error: bool = False) -> ToolResult:
        return ToolResult(tool=self.name, text=text, is_error=is_error)

    def run(self, session, args) -> ToolResult:
        raise NotImplementedError
