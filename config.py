# Shardeum MCP Configuration

import os

DEFAULT_RPC_URL = "https://api-testnet.shardeum.org/"

# RPC設定
RPC_CONFIG = {
    "url": os.getenv("RPC_URL", DEFAULT_RPC_URL),
    "timeout": float(os.getenv("RPC_TIMEOUT", "30")),
}

# サーバー設定
SERVER_CONFIG = {
    "name": "shm-mcp",
    "title": "Shardeum MCP Server",
    "version": "1.0.0",
    "protocol_version": "2024-11-05",
    "host": os.getenv("MCP_HOST", "0.0.0.0"),
    "port": int(os.getenv("MCP_PORT", "8003")),
    "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
}
