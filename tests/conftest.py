from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from tools_manager import ToolsManager
from utils.rpc_client import RpcClient

TEST_RPC_URL = "http://rpc.test/"

ADDRESS = "0x" + "ab" * 20
BLOCK_HASH = "0x" + "12" * 32
TX_HASH = "0x" + "cd" * 32

# 各ツールに渡す有効な引数
VALID_ARGUMENTS: dict[str, dict[str, Any]] = {
    "eth_getBalance": {"address": ADDRESS},
    "eth_blockNumber": {},
    "eth_getTransactionCount": {"address": ADDRESS},
    "eth_getBlockTransactionCountByHash": {"blockHash": BLOCK_HASH},
    "eth_getBlockTransactionCountByNumber": {"blockNumber": "0x1b4"},
    "eth_estimateGas": {"from": ADDRESS, "to": ADDRESS, "value": "0x1"},
    "eth_getBlockByHash": {"blockHash": BLOCK_HASH},
    "eth_getBlockByNumber": {"blockNumber": "0x1b4"},
    "eth_getBlockReceipts": {"blockNumberOrHash": "0x1b4"},
    "eth_getTransactionByHash": {"txHash": TX_HASH},
    "eth_getTransactionByBlockHashAndIndex": {"blockHash": BLOCK_HASH, "transactionIndex": "0x0"},
    "eth_getTransactionByBlockNumberAndIndex": {"blockNumber": "0x1b4", "transactionIndex": "0x0"},
    "eth_getTransactionReceipt": {"txHash": TX_HASH},
    "eth_chainId": {},
    "shardeum_getNodeList": {},
    "shardeum_getNetworkAccount": {},
    "shardeum_getCycleInfo": {},
}


def make_http_response(body: Any, status_error: Exception | None = None) -> MagicMock:
    response = MagicMock()
    response.json.return_value = body
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def mock_post():
    with patch("utils.rpc_client.requests.post") as post:
        yield post


@pytest.fixture
def rpc_result(mock_post):
    """モックRPCが返す result を設定するヘルパー"""

    def _set(result: Any) -> MagicMock:
        mock_post.return_value = make_http_response({"jsonrpc": "2.0", "id": 1, "result": result})
        return mock_post

    return _set


@pytest.fixture
def rpc_error(mock_post):
    def _set(code: int, message: str) -> MagicMock:
        mock_post.return_value = make_http_response(
            {"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}}
        )
        return mock_post

    return _set


@pytest.fixture
def tools_manager() -> ToolsManager:
    return ToolsManager(rpc_client=RpcClient(TEST_RPC_URL, timeout=5))


def sent_payload(mock_post: MagicMock) -> dict[str, Any]:
    return mock_post.call_args.kwargs["json"]


def connection_error() -> requests.exceptions.ConnectionError:
    return requests.exceptions.ConnectionError("connection refused")
