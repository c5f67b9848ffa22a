"""
Module 7: Pipeline

Configuration loading and the request-level orchestration of the coding
stages (encode + channel, decode + message recovery, chunk batches).

Public API:
    - load_config(config_path=None) -> dict
    - validate_config(config) -> dict
    - configure_logging(config, quiet=False)
    - CodingPipeline(config=None, rng=None)
"""

from .config import (
    load_config,
    get_default_config,
    validate_config,
    setup_logging,
    configure_logging,
)
from .pipeline import (
    CodingPipeline,
    EncodeResult,
    DecodeResult,
    ChunkBatchResult,
    SUCCESS_MESSAGE,
    FAILURE_MESSAGE,
)

__all__ = [
    "load_config",
    "get_default_config",
    "validate_config",
    "setup_logging",
    "configure_logging",
    "CodingPipeline",
    "EncodeResult",
    "DecodeResult",
    "ChunkBatchResult",
    "SUCCESS_MESSAGE",
    "FAILURE_MESSAGE",
]
