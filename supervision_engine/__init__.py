# supervision_engine/__init__.py

"""
Supervision Engine Package Initialization

Pure computations behind the exam-supervision console: slot fill-rate
aggregation and the instructions precedence cascade.
"""

from .config import (
    SupervisionEngineConfig,
    CapacityConfig,
    config,
    get_logger,
)

from .core import (
    compute_slot_stats,
    compute_session_summary,
    resolve_instructions,
    FillStatus,
    InstructionsSource,
)

__version__ = "1.0.0"

# Package-level exports
__all__ = [
    # Configuration
    "SupervisionEngineConfig",
    "CapacityConfig",
    "config",
    "get_logger",
    # Core components
    "compute_slot_stats",
    "compute_session_summary",
    "resolve_instructions",
    "FillStatus",
    "InstructionsSource",
]
