"""Shared utility helpers used across the core library."""

from .math_utils import (
    approx_equal,
    is_integral,
    exact_sum,
    triples_to_array,
)
from .config import (
    DEFAULT_TOLERANCE,
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    deserialize_from_json,
    mask_sensitive_data,
    VersionedPayload,
)
from .logging import (
    ContentFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_finite,
    ParamValidationError,
)

__all__ = [
    "approx_equal",
    "is_integral",
    "exact_sum",
    "triples_to_array",
    "DEFAULT_TOLERANCE",
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "deserialize_from_json",
    "mask_sensitive_data",
    "VersionedPayload",
    "ContentFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ensure_finite",
    "ParamValidationError",
]
