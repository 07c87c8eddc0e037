from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from classmcp.tools.base import BaseTool
from classmcp.tools.impl_classes import GetClassTool, GetSsrInfoTool, ListClassesTool, SearchClassesTool
from classmcp.tools.impl_config import ListCustomPatternsTool, ReloadConfigTool
from classmcp.tools.impl_css import GenerateCssTool, GetComponentTool
from classmcp.tools.impl_frameworks import ListFrameworksTool, SetFrameworkTool

@dataclass
class ToolRegistry:
    mapping: Dict[str, BaseTool]

    def get(self, name: str) -> Optional[BaseTool]:
        return self.mapping.get(name)

    def describe(self) -> List[Dict[str, Any]]:
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.input_schema()}
            for tool in self.mapping.values()
        ]

    @staticmethod
    def default() -> "ToolRegistry":
        tools = [
            SetFrameworkTool(),
            GetClassTool(),
            ListClassesTool(),
            SearchClassesTool(),
            GenerateCssTool(),
            GetComponentTool(),
            GetSsrInfoTool(),
            ListFrameworksTool(),
            ReloadConfigTool(),
            ListCustomPatternsTool(),
        ]
        return ToolRegistry(mapping={tool.name: tool for tool in tools})
