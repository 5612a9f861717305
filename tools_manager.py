import json
import logging
from functools import partial
from pathlib import Path
from typing import Dict, List, Any, Optional, Type

from pydantic import BaseModel

from models import ToolDefinition
from tools.rpc_tool import execute_rpc_tool
from tools.schema import build_argument_model, validate_arguments
from utils.rpc_client import RpcClient

logger = logging.getLogger(__name__)

DEFAULT_TOOLS_CONFIG = Path(__file__).resolve().parent / "tools" / "tools_config.json"

class ToolsManager:
    """ツール定義の一元管理クラス"""

    def __init__(self, config_path: Path = DEFAULT_TOOLS_CONFIG, rpc_client: Optional[RpcClient] = None):
        with open(config_path, 'r', encoding='utf-8') as f:
            self.config = json.load(f)

        self.rpc_client = rpc_client or RpcClient()
        self.definitions: Dict[str, ToolDefinition] = {}
        self.argument_models: Dict[str, Type[BaseModel]] = {}
        for tool in self.config["tools"]:
            definition = ToolDefinition.model_validate(tool)
            self.definitions[definition.name] = definition
            self.argument_models[definition.name] = build_argument_model(definition)

        logger.info(f"[ToolsManager] Loaded {len(self.definitions)} tools, RPC: {self.rpc_client.rpc_url}")

    def get_input_schema(self, tool_name: str) -> Dict[str, Any]:
        definition = self.definitions[tool_name]
        return {
            "type": "object",
            "properties": definition.parameters,
            "required": definition.required
        }

    def get_tools_list(self) -> List[Dict[str, Any]]:
        """tools/list用のツール一覧"""
        return [
            {
                "name": definition.name,
                "description": definition.description,
                "inputSchema": self.get_input_schema(definition.name)
            }
            for definition in self.definitions.values()
        ]

    def get_tools_descriptions(self) -> List[Dict[str, Any]]:
        """/tools/descriptions用の詳細情報"""
        return [
            {
                "name": definition.name,
                "description": definition.description,
                "usage_context": definition.usage_context,
                "rpc_method": definition.rpc_method,
                "parameters": definition.parameters
            }
            for definition in self.definitions.values()
        ]

    def get_tool_definition(self, tool_name: str) -> Optional[ToolDefinition]:
        return self.definitions.get(tool_name)

    def get_tool_function(self, tool_name: str):
        """ツール名から実行関数を取得（引数: params辞書）"""
        definition = self.definitions.get(tool_name)
        if definition is None:
            return None
        return partial(
            execute_rpc_tool,
            definition,
            self.argument_models[tool_name],
            self.rpc_client
        )

    def validate_tool_arguments(self, tool_name: str, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """ツールのスキーマで引数を検証（プロンプトと共用）"""
        return validate_arguments(self.argument_models[tool_name], arguments)

    def is_valid_tool(self, tool_name: str) -> bool:
        """ツール名の有効性チェック"""
        return tool_name in self.definitions

    def get_tool_names(self) -> List[str]:
        """全ツール名のリスト"""
        return list(self.definitions)
