"""Graph node helpers used by the execution engine."""

from .node import NodeDef, is_reserved_data_source_node, normalize_node_def

__all__ = ["NodeDef", "is_reserved_data_source_node", "normalize_node_def"]
