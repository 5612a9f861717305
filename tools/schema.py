# Shardeum MCP - Tool Argument Schema

import keyword
from typing import Annotated, Dict, Any, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError
from models import ToolDefinition

JSON_TYPES = {
    "string": str,
    "boolean": bool,
    "integer": int,
    "number": float,
}

class ToolArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _field_name(name: str) -> str:
    # "from" などの予約語はエイリアス経由で扱う
    return f"{name}_" if keyword.iskeyword(name) else name


def build_argument_model(definition: ToolDefinition) -> Type[BaseModel]:
    """ツール定義のパラメータからpydanticモデルを生成"""
    fields: Dict[str, Any] = {}
    for name, prop in definition.parameters.items():
        constraints = {}
        if "pattern" in prop:
            constraints["pattern"] = prop["pattern"]
        if "minimum" in prop:
            constraints["ge"] = prop["minimum"]
        annotation = Annotated[JSON_TYPES[prop.get("type", "string")], Field(**constraints)]
        options = {"alias": name, "description": prop.get("description")}

        if name in definition.required:
            fields[_field_name(name)] = (annotation, Field(..., **options))
        elif "default" in prop:
            fields[_field_name(name)] = (annotation, Field(prop["default"], **options))
        else:
            fields[_field_name(name)] = (Optional[annotation], Field(None, **options))

    return create_model(f"{definition.name}Arguments", __base__=ToolArguments, **fields)


def format_validation_error(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "Invalid arguments: " + "; ".join(parts)


def validate_arguments(model: Type[BaseModel], arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """引数を検証し、デフォルト値を補った辞書（元のパラメータ名）を返す"""
    try:
        validated = model.model_validate(arguments or {})
    except PydanticValidationError as e:
        raise ValidationError(format_validation_error(e)) from e
    return validated.model_dump(by_alias=True)
