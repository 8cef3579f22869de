import json
import os
import logging
from typing import Dict, List, Any, Optional, Callable, Awaitable

from models import ToolName, ToolDescription, OperationResult
from tools import product_tools
from utils.api_client import ProductAPIClient

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tools", "tools_config.json")

ToolFunction = Callable[[ProductAPIClient, Dict[str, Any]], Awaitable[OperationResult]]

# ツール名 → 実装関数
TOOL_FUNCTIONS: Dict[ToolName, ToolFunction] = {
    ToolName.GET_PRODUCTS: product_tools.get_products,
    ToolName.GET_PRODUCT: product_tools.get_product,
    ToolName.CREATE_PRODUCT: product_tools.create_product,
    ToolName.UPDATE_PRODUCT: product_tools.update_product,
    ToolName.DELETE_PRODUCT: product_tools.delete_product,
}

if set(TOOL_FUNCTIONS) != set(ToolName):
    raise RuntimeError(f"Tool functions missing for: {sorted(t.value for t in set(ToolName) - set(TOOL_FUNCTIONS))}")


class ToolsManager:
    """ツール定義の一元管理クラス"""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = json.load(f)
        self._check_registry()

    def _check_registry(self):
        """定義ファイルとToolNameの対応チェック"""
        names = [tool["name"] for tool in self.config["tools"]]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate tool definitions: {names}")

        expected = {tool.value for tool in ToolName}
        if set(names) != expected:
            missing = sorted(expected - set(names))
            extra = sorted(set(names) - expected)
            raise ValueError(f"Tool definitions out of sync (missing: {missing}, unknown: {extra})")

    def get_tools_list(self) -> List[Dict[str, Any]]:
        """/mcp/tools用のツール一覧"""
        return [ToolDescription(**tool).model_dump() for tool in self.config["tools"]]

    def is_valid_tool(self, tool_name: Any) -> bool:
        """ツール名の有効性チェック"""
        return tool_name in self.get_tool_names()

    def get_tool_names(self) -> List[str]:
        """全ツール名のリスト"""
        return [tool["name"] for tool in self.config["tools"]]

    def get_tool_function(self, tool_name: str) -> ToolFunction:
        return TOOL_FUNCTIONS[ToolName(tool_name)]

    async def call_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]], client: ProductAPIClient) -> OperationResult:
        """ツール実行（未登録の名前はValueError）"""
        if not self.is_valid_tool(tool_name):
            raise ValueError(f"Unknown tool: {tool_name}")

        tool_function = self.get_tool_function(tool_name)
        logger.info(f"[ToolsManager] Calling {tool_name}")
        return await tool_function(client, arguments or {})
