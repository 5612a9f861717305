# Shardeum MCP Data Models

from pydantic import BaseModel, Field
from typing import Dict, Any, List, Literal, Optional, Union

class MCPRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[Union[int, str]] = None
    method: str
    params: Dict[str, Any] = {}

class MCPResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[Union[int, str]] = None
    result: Any = None
    error: Optional[Dict[str, Any]] = None

class RpcRequest(BaseModel):
    """ノードへ送るJSON-RPC 2.0リクエスト（idは常に1）"""
    jsonrpc: Literal["2.0"] = "2.0"
    id: int = 1
    method: str
    params: List[Any] = Field(default_factory=list)

class RpcErrorObject(BaseModel):
    code: int = 0
    message: str = ""

class RpcResponse(BaseModel):
    jsonrpc: Optional[str] = None
    id: Optional[Union[int, str]] = None
    result: Any = None
    error: Optional[RpcErrorObject] = None

class ToolDefinition(BaseModel):
    """tools_config.json の1エントリ"""
    name: str
    description: str
    usage_context: str = ""
    rpc_method: str
    parameters: Dict[str, Dict[str, Any]] = {}
    required: List[str] = []
    params_style: Literal["positional", "object"] = "positional"
    result_format: Literal["hex_quantity", "balance", "json"]
    result_label: Optional[str] = None
    error_context: str

class ToolDescription(BaseModel):
    name: str
    description: str
    inputSchema: Dict[str, Any]

class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str

class ToolResult(BaseModel):
    """ツール実行結果。失敗時も例外ではなく isError=True の結果として返す"""
    content: List[TextContent]
    isError: bool = False

    @classmethod
    def text(cls, *segments: str) -> "ToolResult":
        return cls(content=[TextContent(text=s) for s in segments])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=message)], isError=True)

class PromptMessage(BaseModel):
    role: Literal["user", "assistant"] = "user"
    content: TextContent

class PromptResult(BaseModel):
    description: Optional[str] = None
    messages: List[PromptMessage]
