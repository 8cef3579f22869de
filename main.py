#!/usr/bin/env python3
"""
Product Catalog MCP Server - 商品CRUDツールAPI
Port: 3000 (PORT)
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from fastapi import FastAPI, Depends, Body
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import SERVER_CONFIG, API_CONFIG
from models import ToolCallRequest
from tools_manager import ToolsManager
from tools import product_tools
from utils.api_client import ProductAPIClient

# ログ設定
logging.basicConfig(level=SERVER_CONFIG["log_level"])
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVER_CONFIG["title"],
    version=SERVER_CONFIG["version"]
)

# ツール管理インスタンス
tools_manager = ToolsManager()

# Product APIクライアント
api_client = ProductAPIClient(API_CONFIG["base_url"], timeout=API_CONFIG["timeout"])

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_api_client() -> ProductAPIClient:
    return api_client


def parse_product_id(product_id: str):
    """ASCII数字のみのIDはintに変換、それ以外はそのまま上流へ渡す"""
    digits = product_id[1:] if product_id.startswith("-") else product_id
    if digits.isascii() and digits.isdigit():
        return int(product_id)
    return product_id


def body_fields(body: Any) -> Dict[str, Any]:
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def rest_error(e: Exception) -> JSONResponse:
    logger.exception(f"[REST] Request failed: {e}")
    return JSONResponse(status_code=500, content={"error": str(e)})


@app.get("/")
async def root():
    return {
        "service": SERVER_CONFIG["title"],
        "version": SERVER_CONFIG["version"],
        "status": "running",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "apiBaseUrl": API_CONFIG["base_url"]
    }


@app.get("/mcp/tools")
async def list_available_tools():
    """ツール定義一覧"""
    return {
        "tools": tools_manager.get_tools_list()
    }


@app.post("/mcp/call")
async def mcp_call(body: Any = Body(default=None), client: ProductAPIClient = Depends(get_api_client)):
    """ツール実行エンドポイント"""
    request = ToolCallRequest.from_body(body)
    tool_name = request.tool
    logger.info(f"[MCP_CALL] Tool name: {tool_name}")

    if not tool_name:
        return JSONResponse(status_code=400, content={"error": "Tool name is required"})

    if not tools_manager.is_valid_tool(tool_name):
        logger.warning(f"[MCP_CALL] Unknown tool: {tool_name}")
        return JSONResponse(status_code=400, content={"error": f"Unknown tool: {tool_name}"})

    try:
        result = await tools_manager.call_tool(tool_name, request.arguments, client)
        return result.to_response()

    except Exception as e:
        logger.exception(f"[MCP_CALL] Error executing tool {tool_name}: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(e)
            }
        )


# 個別ツールエンドポイント（REST形式）
@app.get("/tools/products")
async def rest_get_products(search: Optional[str] = None, client: ProductAPIClient = Depends(get_api_client)):
    try:
        result = await product_tools.get_products(client, {"search": search})
        return result.to_response()
    except Exception as e:
        return rest_error(e)


@app.get("/tools/products/{product_id}")
async def rest_get_product(product_id: str, client: ProductAPIClient = Depends(get_api_client)):
    try:
        result = await product_tools.get_product(client, {"id": parse_product_id(product_id)})
        return result.to_response()
    except Exception as e:
        return rest_error(e)


@app.post("/tools/products")
async def rest_create_product(body: Any = Body(default=None), client: ProductAPIClient = Depends(get_api_client)):
    try:
        result = await product_tools.create_product(client, body_fields(body))
        return result.to_response()
    except Exception as e:
        return rest_error(e)


@app.put("/tools/products/{product_id}")
async def rest_update_product(product_id: str, body: Any = Body(default=None), client: ProductAPIClient = Depends(get_api_client)):
    try:
        arguments = {**body_fields(body), "id": parse_product_id(product_id)}
        result = await product_tools.update_product(client, arguments)
        return result.to_response()
    except Exception as e:
        return rest_error(e)


@app.delete("/tools/products/{product_id}")
async def rest_delete_product(product_id: str, client: ProductAPIClient = Depends(get_api_client)):
    try:
        result = await product_tools.delete_product(client, {"id": parse_product_id(product_id)})
        return result.to_response()
    except Exception as e:
        return rest_error(e)


def run():
    import uvicorn
    logger.info(f"MCP Server running on port {SERVER_CONFIG['port']}")
    logger.info(f"Health check: http://localhost:{SERVER_CONFIG['port']}/health")
    logger.info(f"MCP Tools: http://localhost:{SERVER_CONFIG['port']}/mcp/tools")
    logger.info(f"API Base URL: {API_CONFIG['base_url']}")
    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])


if __name__ == "__main__":
    run()
