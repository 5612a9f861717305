# Shardeum MCP Errors

from typing import Optional


class ToolError(Exception):
    """ツール境界で捕捉され、エラー結果テキストに変換される例外の基底クラス"""


class ValidationError(ToolError):
    """引数がツールのスキーマに一致しない"""


class TransportError(ToolError):
    """接続失敗・タイムアウト・非2xxレスポンス"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RpcError(ToolError):
    """ノードが JSON-RPC の error オブジェクトを返した"""

    def __init__(self, code: int, message: str):
        super().__init__(f"RPC Error: {message}")
        self.code = code
        self.rpc_message = message


class ResultFormatError(ToolError):
    """結果が期待した形式（16進数量など）ではない"""
