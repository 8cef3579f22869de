# Product API Client

import requests
import logging
from typing import List, Dict, Any, Optional
from fastapi.concurrency import run_in_threadpool

from models import OperationResult

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Product APIの非2xx応答・通信エラー"""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(body)
        else:
            super().__init__(f"HTTP {status_code}: {body}")


def _not_found(product_id) -> OperationResult:
    return OperationResult(
        success=False,
        error=f"Product with ID {product_id} not found",
        data=None
    )


class ProductAPIClient:
    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        # 未指定時はリクエスト毎に requests.request を使う（Sessionをスレッド間で共有しない）
        self.session = session
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}/api/products{path}"
        logger.info(f"[ProductAPIClient] {method} {url}")
        try:
            send = self.session.request if self.session is not None else requests.request
            return send(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"[ProductAPIClient] Request to {url} failed: {e}")
            raise UpstreamError(None, f"Product API request failed: {e}") from e

    async def _send(self, method: str, path: str = "", not_found_ok: bool = False, **kwargs) -> requests.Response:
        """スレッドプールで送信し、404以外の非2xxはUpstreamErrorとして送出"""
        response = await run_in_threadpool(self._request, method, path, **kwargs)

        if not_found_ok and response.status_code == 404:
            return response

        if not response.ok:
            body = response.text or response.reason or ""
            logger.error(f"[ProductAPIClient] {method} {path or '/'} -> {response.status_code}: {body}")
            raise UpstreamError(response.status_code, body)

        return response

    async def list_products(self, search: Optional[str] = None) -> OperationResult:
        """全商品取得 / 検索"""
        params = {"search": search} if search else None
        response = await self._send("GET", params=params)

        products: List[Dict[str, Any]] = response.json()
        if search:
            message = f'Found {len(products)} products matching "{search}"'
        else:
            message = f"Retrieved {len(products)} products"

        logger.info(f"[ProductAPIClient] {message}")
        return OperationResult(success=True, data=products, message=message)

    async def get_product(self, product_id) -> OperationResult:
        response = await self._send("GET", f"/{product_id}", not_found_ok=True)
        if response.status_code == 404:
            return _not_found(product_id)

        product = response.json()
        return OperationResult(
            success=True,
            data=product,
            message=f"Retrieved product: {product.get('name')}"
        )

    async def create_product(self, fields: Dict[str, Any]) -> OperationResult:
        response = await self._send("POST", json=fields)

        product = response.json()
        return OperationResult(
            success=True,
            data=product,
            message=f'Product "{product.get("name")}" created successfully with ID {product.get("id")}'
        )

    async def update_product(self, product_id, fields: Dict[str, Any]) -> OperationResult:
        """商品更新（idはボディに含めない）"""
        body = {k: v for k, v in fields.items() if k != "id"}
        response = await self._send("PUT", f"/{product_id}", not_found_ok=True, json=body)
        if response.status_code == 404:
            return _not_found(product_id)

        product = response.json()
        return OperationResult(
            success=True,
            data=product,
            message=f'Product "{product.get("name")}" updated successfully'
        )

    async def delete_product(self, product_id) -> OperationResult:
        response = await self._send("DELETE", f"/{product_id}", not_found_ok=True)
        if response.status_code == 404:
            return _not_found(product_id)

        return OperationResult(
            success=True,
            data=None,
            message=f"Product with ID {product_id} deleted successfully"
        )
