"""
ContigSensors v0.1.0

Configuration schema for ContigSensors.

Defines all available configuration parameters with defaults and validation,
and converts a validated configuration dictionary into a RunConfig.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml

from .run_config import (
    ConfigValidationError,
    LocationClassType,
    RunConfig,
    SamplingConfig,
    SensorConfig,
    SensorType,
)


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Sensor encoding
    # ========================================================================
    'sensors': {
        'type': 'channel',  # direct, channel, codon-numeric, codon-string, one-hot, amino-acid
        'left_width': 21,  # positions sensed upstream of the target
        'right_width': 44,  # positions sensed downstream of the target
    },

    # ========================================================================
    # Location classification
    # ========================================================================
    'classification': {
        'type': 'edge',  # phase, coding, edge, start, stop
        'negative': False,  # treat minus-strand proteins as coding regions
    },

    # ========================================================================
    # Chunked random sampling (training mode)
    # ========================================================================
    'sampling': {
        'chunk_size': 50000,
        'run_length': 200,
        'seed': None,  # None = nondeterministic
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'fuzz_factor': 0.0,  # 0 = stream; 1.0-2.0 = class-balanced
        'edge_filter': True,  # restrict edge/start/stop output to marker codons
    },
}

CONFIG_TEMPLATES = ('default', 'phase', 'edge', 'protein')


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file, merged with defaults.

    Args:
        config_path: Path to YAML configuration file (optional)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ConfigValidationError: If the file is not valid YAML
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {config_path}: {e}"
            )

        if user_config:
            if not isinstance(user_config, dict):
                raise ConfigValidationError(
                    f"Config file {config_path} must contain a mapping"
                )
            # Deep merge user config into defaults
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def merge_cli_overrides(config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line overrides into a configuration.

    Keys use dotted notation (e.g. 'sensors.left_width').  Overrides whose
    value is None are ignored so unset CLI options keep the file values.
    """
    result = copy.deepcopy(config)
    for key, value in overrides.items():
        if value is None:
            continue
        keys = key.split('.')
        target = result
        for k in keys[:-1]:
            target = target.setdefault(k, {})
        target[keys[-1]] = value
    return result


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'phase', 'edge', 'protein')
    """
    if template not in CONFIG_TEMPLATES:
        raise ConfigValidationError(f"Unknown configuration template: {template}")

    config = copy.deepcopy(DEFAULT_CONFIG)

    # Customize for specific templates
    if template == 'phase':
        config['classification']['type'] = 'phase'
        config['sensors']['type'] = 'one-hot'
        config['sensors']['left_width'] = 14
        config['sensors']['right_width'] = 14

    elif template == 'edge':
        config['classification']['type'] = 'edge'
        config['output']['fuzz_factor'] = 1.5

    elif template == 'protein':
        config['sensors']['type'] = 'amino-acid'
        config['classification']['type'] = 'coding'
        config['classification']['negative'] = True
        config['output']['fuzz_factor'] = 1.0

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    sensors = config.get('sensors', {})
    classification = config.get('classification', {})
    sampling = config.get('sampling', {})
    output = config.get('output', {})

    sensor_type = None
    try:
        sensor_type = SensorType.parse(sensors.get('type'))
    except ConfigValidationError as e:
        errors.append(str(e))

    class_type = None
    try:
        class_type = LocationClassType.parse(classification.get('type'))
    except ConfigValidationError as e:
        errors.append(str(e))

    # Window widths, including codon alignment for stride-3 encodings
    try:
        sensor_config = SensorConfig(
            left_width=sensors.get('left_width'),
            right_width=sensors.get('right_width'),
        )
        if sensor_type in (SensorType.CODON_STRING, SensorType.AMINO_ACID):
            sensor_config.check_stride(3)
    except ConfigValidationError as e:
        errors.append(str(e))

    if class_type is LocationClassType.EDGE and classification.get('negative'):
        errors.append("Edge classification does not support minus-strand coding regions")

    for key in ('chunk_size', 'run_length'):
        value = sampling.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            errors.append(f"Invalid sampling.{key}: must be a positive integer, got {value!r}")

    seed = sampling.get('seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        errors.append(f"Invalid sampling.seed: must be an integer or null, got {seed!r}")

    fuzz = output.get('fuzz_factor', 0.0)
    if isinstance(fuzz, bool) or not isinstance(fuzz, (int, float)):
        errors.append(f"Invalid output.fuzz_factor: must be a number, got {fuzz!r}")
    elif fuzz != 0 and not 1.0 <= fuzz <= 2.0:
        errors.append(f"Invalid output.fuzz_factor: must be 0 or between 1.0 and 2.0, got {fuzz}")

    return errors


def build_run_config(config: Dict[str, Any]) -> RunConfig:
    """
    Convert a configuration dictionary into an immutable RunConfig.

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    errors = validate_config(config)
    if errors:
        raise ConfigValidationError(errors[0])

    sensors = config['sensors']
    classification = config['classification']
    sampling = config['sampling']
    output = config['output']

    return RunConfig(
        sensor_type=SensorType.parse(sensors['type']),
        class_type=LocationClassType.parse(classification['type']),
        negative=bool(classification.get('negative', False)),
        edge_filter=bool(output.get('edge_filter', True)),
        sensors=SensorConfig(
            left_width=sensors['left_width'],
            right_width=sensors['right_width'],
        ),
        sampling=SamplingConfig(
            chunk_size=sampling['chunk_size'],
            run_length=sampling['run_length'],
            fuzz_factor=float(output.get('fuzz_factor', 0.0)),
            seed=sampling.get('seed'),
        ),
    )
