import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from models import PromptMessage, PromptResult, TextContent
from prompts import templates
from tools_manager import ToolsManager

logger = logging.getLogger(__name__)


class PromptDefinition(NamedTuple):
    name: str
    tool_name: str
    description: str
    render: Callable[[Dict[str, Any]], str]


PROMPT_DEFINITIONS: List[PromptDefinition] = [
    PromptDefinition("address_balance", "eth_getBalance",
                     "Financial analysis of an address balance", templates.address_balance),
    PromptDefinition("block_number", "eth_blockNumber",
                     "Analyze the current block height", templates.block_number),
    PromptDefinition("transaction_count", "eth_getTransactionCount",
                     "Analyze the transaction history of an address", templates.transaction_count),
    PromptDefinition("block_transactions_by_hash", "eth_getBlockTransactionCountByHash",
                     "Analyze the transactions of a block by hash", templates.block_transactions_by_hash),
    PromptDefinition("block_transactions_by_number", "eth_getBlockTransactionCountByNumber",
                     "Analyze the transactions of a block by number", templates.block_transactions_by_number),
    PromptDefinition("estimate_gas", "eth_estimateGas",
                     "Gas cost analysis for a transaction", templates.estimate_gas),
    PromptDefinition("block_by_hash", "eth_getBlockByHash",
                     "Analyze a block by hash", templates.block_by_hash),
    PromptDefinition("block_by_number", "eth_getBlockByNumber",
                     "Analyze a block by number", templates.block_by_number),
    PromptDefinition("block_receipts", "eth_getBlockReceipts",
                     "Analyze the transaction receipts of a block", templates.block_receipts),
    PromptDefinition("transaction_by_hash", "eth_getTransactionByHash",
                     "Forensic analysis of a transaction", templates.transaction_by_hash),
    PromptDefinition("transaction_by_block_hash_index", "eth_getTransactionByBlockHashAndIndex",
                     "Analyze a transaction by block hash and index", templates.transaction_by_block_hash_index),
    PromptDefinition("transaction_by_block_number_index", "eth_getTransactionByBlockNumberAndIndex",
                     "Analyze a transaction by block number and index", templates.transaction_by_block_number_index),
    PromptDefinition("transaction_receipt", "eth_getTransactionReceipt",
                     "Forensic analysis of a transaction receipt", templates.transaction_receipt),
    PromptDefinition("chain_id", "eth_chainId",
                     "Analyze the network identification", templates.chain_id),
    PromptDefinition("shardeum_node_list", "shardeum_getNodeList",
                     "Analyze the Shardeum node list", templates.shardeum_node_list),
    PromptDefinition("shardeum_network_account", "shardeum_getNetworkAccount",
                     "Analyze the Shardeum network account", templates.shardeum_network_account),
    PromptDefinition("shardeum_cycle_info", "shardeum_getCycleInfo",
                     "Analyze a Shardeum network cycle", templates.shardeum_cycle_info),
]


class PromptsManager:
    """プロンプト定義の一元管理クラス（RPCは実行しない）"""

    def __init__(self, tools_manager: ToolsManager):
        self.tools_manager = tools_manager
        self.definitions = {prompt.name: prompt for prompt in PROMPT_DEFINITIONS}

    def get_prompts_list(self) -> List[Dict[str, Any]]:
        """prompts/list用のプロンプト一覧"""
        prompts = []
        for prompt in self.definitions.values():
            schema = self.tools_manager.get_input_schema(prompt.tool_name)
            prompts.append({
                "name": prompt.name,
                "description": prompt.description,
                "arguments": [
                    {
                        "name": name,
                        "description": prop.get("description", ""),
                        "required": name in schema["required"]
                    }
                    for name, prop in schema["properties"].items()
                ]
            })
        return prompts

    def is_valid_prompt(self, prompt_name: str) -> bool:
        return prompt_name in self.definitions

    def get_prompt(self, prompt_name: str, arguments: Optional[Dict[str, Any]] = None) -> PromptResult:
        """引数をツールと同じスキーマで検証し、指示文を生成（ValidationErrorはそのまま送出）"""
        prompt = self.definitions[prompt_name]
        validated = self.tools_manager.validate_tool_arguments(prompt.tool_name, arguments)
        logger.info(f"[PromptsManager] Rendering prompt {prompt_name}")

        return PromptResult(
            description=prompt.description,
            messages=[PromptMessage(role="user", content=TextContent(text=prompt.render(validated)))]
        )
