"""Pipeline node definitions and the reserved data source node check."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..constants import DATA_TABLE, READ_DATA
from ..errors import SchemaDecodeError


class NodeDef(BaseModel):
    """Typed node definition of a pipeline graph node."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    domain: str = ""
    name: str = ""
    version: str = ""
    attr_paths: list[str] = Field(default_factory=list)
    attrs: list[dict[str, Any]] = Field(default_factory=list)
    inputs: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    checkpoint_uri: str = ""

    @field_validator("domain", "name", "version", "checkpoint_uri", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        # JSON null on a scalar field decodes to its default
        return "" if value is None else value

    @field_validator("attr_paths", "attrs", "inputs", "outputs", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value


def normalize_node_def(node: NodeDef | Any) -> NodeDef:
    """
    Return ``node`` as a typed NodeDef.

    Untyped structures are serialized to JSON and parsed against the
    NodeDef schema.

    Raises:
        SchemaDecodeError: if the payload cannot be serialized or does
            not match the schema.
    """
    if isinstance(node, NodeDef):
        return node

    try:
        text = json.dumps(node, sort_keys=True)
    except (TypeError, ValueError) as e:
        raise SchemaDecodeError(node, str(e)) from e

    try:
        return NodeDef.model_validate_json(text)
    except ValidationError as e:
        raise SchemaDecodeError(node, str(e)) from e


def is_reserved_data_source_node(node: NodeDef | Any) -> bool:
    """True if ``node`` is the built-in read-data/data-table node."""
    node_def = normalize_node_def(node)
    return node_def.domain == READ_DATA and node_def.name == DATA_TABLE
