"""
ContigSensors v0.1.0

Configuration management for ContigSensors.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .run_config import (
    ConfigValidationError,
    LocationClassType,
    RunConfig,
    SamplingConfig,
    SensorConfig,
    SensorType,
)
from .schema import (
    DEFAULT_CONFIG,
    build_run_config,
    load_config,
    merge_cli_overrides,
    save_config_template,
    validate_config,
)

__all__ = [
    "ConfigValidationError",
    "LocationClassType",
    "RunConfig",
    "SamplingConfig",
    "SensorConfig",
    "SensorType",
    "DEFAULT_CONFIG",
    "build_run_config",
    "load_config",
    "merge_cli_overrides",
    "save_config_template",
    "validate_config",
]
