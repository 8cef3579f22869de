#!/usr/bin/env python3
"""
Product Catalog MCP Server スモークテスト
使い方: TEST_URL=http://localhost:3000 python tests/smoke_check.py
"""

import os
import sys
import requests

BASE_URL = os.getenv("TEST_URL", "http://localhost:3000").rstrip("/")


def smoke_check():
    print("=== MCP Server スモークテスト ===")
    print(f"Base URL: {BASE_URL}")

    try:
        # ヘルスチェック
        print("\n1. ヘルスチェック:")
        response = requests.get(f"{BASE_URL}/health", timeout=10)
        if not response.ok:
            print(f"  ❌ 失敗: HTTP {response.status_code}")
            return
        health = response.json()
        print(f"  ✅ 成功: {health.get('status')} (apiBaseUrl: {health.get('apiBaseUrl')})")

        # ツール一覧
        print("\n2. ツール一覧:")
        response = requests.get(f"{BASE_URL}/mcp/tools", timeout=10)
        if response.ok:
            tools = response.json().get("tools", [])
            print(f"  ✅ {len(tools)}個のツール: {[tool['name'] for tool in tools]}")
        else:
            print(f"  ❌ 失敗: HTTP {response.status_code}")

        # MCP経由で商品取得
        print("\n3. get_products 呼び出し:")
        response = requests.post(
            f"{BASE_URL}/mcp/call",
            json={"tool": "get_products", "arguments": {}},
            timeout=30
        )
        if response.ok:
            result = response.json()
            if result.get("success"):
                print(f"  ✅ 成功: {result.get('message')}")
            else:
                print(f"  ⚠️ エラー結果: {result.get('error')}")
        else:
            print(f"  ❌ 失敗: HTTP {response.status_code} {response.text}")

        print("\n=== 完了 ===")

    except requests.exceptions.RequestException as e:
        print(f"❌ テスト失敗: {e}")
        sys.exit(1)


if __name__ == "__main__":
    smoke_check()
