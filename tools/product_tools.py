# Product Catalog MCP - Product CRUD Tools

import logging
from typing import Dict, Any

from models import OperationResult
from utils.api_client import ProductAPIClient

logger = logging.getLogger(__name__)


async def get_products(client: ProductAPIClient, arguments: Dict[str, Any]) -> OperationResult:
    """全商品取得 or 検索"""
    return await client.list_products(arguments.get("search"))


async def get_product(client: ProductAPIClient, arguments: Dict[str, Any]) -> OperationResult:
    return await client.get_product(arguments["id"])


async def create_product(client: ProductAPIClient, arguments: Dict[str, Any]) -> OperationResult:
    logger.info(f"[create_product] Fields: {sorted(arguments)}")
    return await client.create_product(arguments)


async def update_product(client: ProductAPIClient, arguments: Dict[str, Any]) -> OperationResult:
    """id以外の引数を更新内容として送信"""
    fields = dict(arguments)
    product_id = fields.pop("id")
    return await client.update_product(product_id, fields)


async def delete_product(client: ProductAPIClient, arguments: Dict[str, Any]) -> OperationResult:
    return await client.delete_product(arguments["id"])
