# Product Catalog MCP Configuration

import os


def _optional_float(value):
    if value in (None, ""):
        return None
    return float(value)


# サーバー設定
SERVER_CONFIG = {
    "title": "Product Catalog MCP Server",
    "version": "1.0.0",
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "3000")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
}

# Product API設定
API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "https://sample-web-api.azurewebsites.net/"),
    "timeout": _optional_float(os.getenv("API_TIMEOUT")),
}
