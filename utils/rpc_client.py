# Shardeum JSON-RPC Client

import requests
import logging
from pydantic import ValidationError as PydanticValidationError
from typing import Any, List, Optional

from config import RPC_CONFIG
from errors import RpcError, TransportError
from models import RpcRequest, RpcResponse

logger = logging.getLogger(__name__)

class RpcClient:
    """1回の呼び出しにつき1つの JSON-RPC リクエストを送るクライアント"""

    def __init__(self, rpc_url: Optional[str] = None, timeout: Optional[float] = None):
        self.rpc_url = rpc_url or RPC_CONFIG["url"]
        self.timeout = timeout if timeout is not None else RPC_CONFIG["timeout"]

    def build_request(self, method: str, params: Optional[List[Any]] = None) -> RpcRequest:
        return RpcRequest(method=method, params=list(params or []))

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """RPCメソッドを呼び出し、result をそのまま返す"""
        payload = self.build_request(method, params).model_dump()
        logger.debug(f"RPC request to {self.rpc_url}: {payload}")

        try:
            response = requests.post(self.rpc_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error making RPC call to {method}: {e}")
            raise TransportError(f"Transport error: {e}", cause=e)
        except ValueError as e:
            logger.error(f"Invalid JSON from RPC call to {method}: {e}")
            raise TransportError(f"Invalid JSON response: {e}", cause=e)

        if not isinstance(body, dict):
            raise TransportError(f"Unexpected response body: {body!r}")

        try:
            rpc_response = RpcResponse.model_validate(body)
        except PydanticValidationError as e:
            raise TransportError(f"Malformed JSON-RPC response: {e}", cause=e)

        if rpc_response.error is not None:
            logger.error(f"Error making RPC call to {method}: {rpc_response.error.message}")
            raise RpcError(rpc_response.error.code, rpc_response.error.message)

        return rpc_response.result


def make_rpc_call(method: str, params: Optional[List[Any]] = None, rpc_url: Optional[str] = None) -> Any:
    """単発呼び出し用のショートカット"""
    return RpcClient(rpc_url).call(method, params)
