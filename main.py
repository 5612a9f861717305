#!/usr/bin/env python3
"""
Shardeum MCP Server - Ethereum互換JSON-RPCツール
Port: 8003
"""

import logging
from datetime import datetime
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from config import RPC_CONFIG, SERVER_CONFIG
from errors import ValidationError
from models import MCPRequest, MCPResponse
from prompts_manager import PromptsManager
from tools_manager import ToolsManager

# ログ設定
logging.basicConfig(level=SERVER_CONFIG["log_level"])
logger = logging.getLogger(__name__)

# JSON-RPCエラーコード
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

app = FastAPI(
    title=SERVER_CONFIG["title"],
    version=SERVER_CONFIG["version"]
)

# ツール・プロンプト管理インスタンス
tools_manager = ToolsManager()
prompts_manager = PromptsManager(tools_manager)

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(request_id, code: int, message: str) -> MCPResponse:
    return MCPResponse(id=request_id, error={"code": code, "message": message})


@app.get("/")
async def root():
    return {
        "service": SERVER_CONFIG["title"],
        "version": SERVER_CONFIG["version"],
        "status": "running",
        "rpc_url": RPC_CONFIG["url"],
        "timestamp": datetime.now().isoformat()
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": SERVER_CONFIG["name"],
        "timestamp": datetime.now().isoformat()
    }

@app.post("/mcp")
async def mcp_endpoint(request: MCPRequest):
    """MCPプロトコルエンドポイント"""
    method = request.method
    params = request.params
    logger.info(f"[MCP_ENDPOINT] Request received: method={method} id={request.id}")

    # 通知には応答を返さない
    if method.startswith("notifications/"):
        return Response(status_code=202)

    try:
        if method == "initialize":
            return MCPResponse(
                id=request.id,
                result={
                    "protocolVersion": SERVER_CONFIG["protocol_version"],
                    "capabilities": {"tools": {}, "prompts": {}},
                    "serverInfo": {
                        "name": SERVER_CONFIG["name"],
                        "version": SERVER_CONFIG["version"]
                    }
                }
            )

        elif method == "ping":
            return MCPResponse(id=request.id, result={})

        elif method == "tools/list":
            return MCPResponse(
                id=request.id,
                result={"tools": tools_manager.get_tools_list()}
            )

        elif method == "tools/call":
            tool_name = params.get("name")
            arguments = params.get("arguments") or {}
            logger.info(f"[MCP_ENDPOINT] Tool name: {tool_name}")

            tool_function = tools_manager.get_tool_function(tool_name)
            if tool_function is None:
                return error_response(request.id, INVALID_PARAMS, f"Unknown tool: {tool_name}")

            tool_result = await tool_function(arguments)
            return MCPResponse(id=request.id, result=tool_result.model_dump())

        elif method == "prompts/list":
            return MCPResponse(
                id=request.id,
                result={"prompts": prompts_manager.get_prompts_list()}
            )

        elif method == "prompts/get":
            prompt_name = params.get("name")
            if not prompts_manager.is_valid_prompt(prompt_name):
                return error_response(request.id, INVALID_PARAMS, f"Unknown prompt: {prompt_name}")

            try:
                prompt_result = prompts_manager.get_prompt(prompt_name, params.get("arguments"))
            except ValidationError as e:
                return error_response(request.id, INVALID_PARAMS, str(e))
            return MCPResponse(id=request.id, result=prompt_result.model_dump())

        else:
            return error_response(request.id, METHOD_NOT_FOUND, f"Unknown method: {method}")

    except Exception as e:
        logger.exception(f"[MCP_ENDPOINT] Exception while handling {method}: {e}")
        return error_response(request.id, INTERNAL_ERROR, f"Internal error: {e}")

@app.get("/tools")
async def list_available_tools():
    """MCPプロトコル準拠のツール一覧"""
    return {
        "tools": tools_manager.get_tools_list()
    }

@app.get("/tools/descriptions")
async def get_tool_descriptions():
    """ツール詳細情報"""
    return {
        "tools": tools_manager.get_tools_descriptions()
    }

@app.get("/prompts")
async def list_available_prompts():
    """プロンプト一覧"""
    return {
        "prompts": prompts_manager.get_prompts_list()
    }

if __name__ == "__main__":
    import uvicorn
    logger.info(f"{SERVER_CONFIG['name']} MCP Server (v{SERVER_CONFIG['version']}) is running...")
    logger.info(f"Connected to RPC: {RPC_CONFIG['url']}")
    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])
