"""Generation configuration with frozen, hashable, serializable dataclasses."""

from randgraph.config.defaults import DEFAULT_CONFIG
from randgraph.config.generation import GenerationConfig
from randgraph.config.hashing import config_hash
from randgraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "GenerationConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
]
