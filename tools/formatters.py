# Shardeum MCP - Result Formatters

import json
import re
from decimal import Decimal
from typing import Any, Callable, Dict

from errors import ResultFormatError
from models import ToolDefinition

WEI_PER_ETH = 10 ** 18
ETH_SCALE = 10 ** 4
HEX_QUANTITY = re.compile(r"0x[0-9a-f]+", re.IGNORECASE)


def parse_hex_quantity(value: Any) -> int:
    """0x付き16進数量を整数に変換"""
    if not isinstance(value, str) or not HEX_QUANTITY.fullmatch(value):
        raise ResultFormatError(f"Expected a hex quantity, got {value!r}")
    return int(value, 16)


def wei_to_eth(wei: int) -> Decimal:
    """wei を ETH に換算し、小数点以下4桁に四捨五入"""
    # Decimalのコンテキスト精度に依存しないよう整数演算で丸める
    scaled = (wei * ETH_SCALE + WEI_PER_ETH // 2) // WEI_PER_ETH
    return Decimal(f"{scaled // ETH_SCALE}.{scaled % ETH_SCALE:04d}")


def format_hex_quantity(definition: ToolDefinition, arguments: Dict[str, Any], result: Any) -> str:
    decimal_value = parse_hex_quantity(result)
    label = (definition.result_label or definition.name).format(**arguments)
    return f"{label}: {decimal_value} ({result})"


def format_balance(definition: ToolDefinition, arguments: Dict[str, Any], result: Any) -> str:
    balance_wei = parse_hex_quantity(result)
    balance_eth = wei_to_eth(balance_wei)
    return (
        f"Balance for {arguments['address']} at block {arguments['blockParameter']}:\n"
        f"- Wei: {balance_wei}\n"
        f"- ETH: {balance_eth:.4f}"
    )


def format_json(definition: ToolDefinition, arguments: Dict[str, Any], result: Any) -> str:
    return json.dumps(result, ensure_ascii=False, indent=2)


FORMATTERS: Dict[str, Callable[[ToolDefinition, Dict[str, Any], Any], str]] = {
    "hex_quantity": format_hex_quantity,
    "balance": format_balance,
    "json": format_json,
}


def format_result(definition: ToolDefinition, arguments: Dict[str, Any], result: Any) -> str:
    """ツール定義の result_format に従って結果をテキスト化"""
    return FORMATTERS[definition.result_format](definition, arguments, result)
