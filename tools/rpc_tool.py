# Shardeum MCP - Generic RPC Tool

import logging
from typing import Dict, Any, List, Optional, Type

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from errors import ToolError
from models import ToolDefinition, ToolResult
from tools.formatters import format_result
from tools.schema import validate_arguments
from utils.rpc_client import RpcClient

logger = logging.getLogger(__name__)


def build_rpc_params(definition: ToolDefinition, arguments: Dict[str, Any]) -> List[Any]:
    """検証済み引数をRPCメソッドの引数順に並べる"""
    if definition.params_style == "object":
        # eth_estimateGas / shardeum_getNodeList: 指定された値だけを1つのオブジェクトにまとめる
        return [{name: arguments[name] for name in definition.parameters if arguments.get(name) is not None}]

    params = [arguments.get(name) for name in definition.parameters]
    while params and params[-1] is None:
        params.pop()
    return params


async def execute_rpc_tool(
    definition: ToolDefinition,
    argument_model: Type[BaseModel],
    rpc_client: RpcClient,
    params: Optional[Dict[str, Any]] = None,
) -> ToolResult:
    """検証 → RPC呼び出し → テキスト化。失敗はエラー結果として返す"""
    try:
        arguments = validate_arguments(argument_model, params)
        rpc_params = build_rpc_params(definition, arguments)
        logger.info(f"[{definition.name}] Calling {definition.rpc_method} with params: {rpc_params}")

        # requestsはブロッキングなのでスレッドプールで実行
        result = await run_in_threadpool(rpc_client.call, definition.rpc_method, rpc_params)
        text = format_result(definition, arguments, result)
        return ToolResult.text(text)

    except ToolError as e:
        logger.warning(f"[{definition.name}] Failed to {definition.error_context}: {e}")
        return ToolResult.error(f"Error: Failed to {definition.error_context}. {e}")
