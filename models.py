# Product Catalog MCP Data Models

from enum import Enum
from pydantic import BaseModel
from typing import Dict, Any, Optional


class ToolName(str, Enum):
    GET_PRODUCTS = "get_products"
    GET_PRODUCT = "get_product"
    CREATE_PRODUCT = "create_product"
    UPDATE_PRODUCT = "update_product"
    DELETE_PRODUCT = "delete_product"


class ToolCallRequest(BaseModel):
    tool: Any = None
    arguments: Dict[str, Any] = {}

    @classmethod
    def from_body(cls, body: Any) -> "ToolCallRequest":
        """任意のJSONボディから生成（オブジェクト以外・不正なargumentsは空扱い）"""
        if not isinstance(body, dict):
            body = {}
        arguments = body.get("arguments")
        return cls(
            tool=body.get("tool"),
            arguments=arguments if isinstance(arguments, dict) else {}
        )


class OperationResult(BaseModel):
    success: bool
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        """明示的に設定したフィールドのみ返す（data: null は残す）"""
        return self.model_dump(exclude_unset=True)


class ToolDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]
