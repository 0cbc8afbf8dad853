#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("gitall")

DEFAULT_BASE_DIR = "~/projects"
TRUE_VALUES = ('true', '1', 'yes', 'on')


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GITALL_CONFIG environment variable
    2. ~/.gitall.json
    3. ~/.gitall.toml
    """
    if 'GITALL_CONFIG' in os.environ:
        return Path(os.environ['GITALL_CONFIG']).expanduser()

    json_path = Path.home() / '.gitall.json'
    toml_path = Path.home() / '.gitall.toml'
    if not json_path.exists() and toml_path.exists():
        return toml_path

    return json_path


def get_default_config():
    """Get default configuration."""
    return {
        "base_dir": DEFAULT_BASE_DIR,
        "timeout": None,
        "strict": False,
    }


def load_config():
    """Load configuration from file.

    The file is optional and never written back. Unknown keys are kept so
    that a newer config file does not break an older install.
    """
    config_path = get_config_path()
    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() == '.toml':
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            if not isinstance(file_config, dict):
                raise ValueError("top level must be an object")

            config = validate_config(merge_configs(config, file_config))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    config = apply_env_overrides(config)
    config['config_path'] = str(config_path)

    return config


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def validate_config(config):
    """
    Replace file values of the wrong type with their defaults.

    Each rejected value is logged at ERROR. A string 'strict' is read the
    same way as GITALL_STRICT.
    """
    defaults = get_default_config()

    base_dir = config.get('base_dir')
    if not isinstance(base_dir, str) or not base_dir.strip():
        logger.error(f"Ignoring invalid base_dir in config: {base_dir!r}")
        config['base_dir'] = defaults['base_dir']

    timeout = config.get('timeout')
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not timeout > 0:
            logger.error(f"Ignoring invalid timeout in config: {timeout!r}")
            config['timeout'] = defaults['timeout']

    strict = config.get('strict')
    if isinstance(strict, str):
        config['strict'] = strict.strip().lower() in TRUE_VALUES
    elif not isinstance(strict, bool):
        logger.error(f"Ignoring invalid strict in config: {strict!r}")
        config['strict'] = defaults['strict']

    return config


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.

    GITALL_DIR, GITALL_TIMEOUT and GITALL_STRICT map onto the
    base_dir, timeout and strict keys.
    """
    if os.environ.get('GITALL_DIR'):
        config['base_dir'] = os.environ['GITALL_DIR']

    timeout = os.environ.get('GITALL_TIMEOUT')
    if timeout:
        try:
            value = float(timeout)
        except ValueError:
            value = None
        if value is not None and value > 0:
            config['timeout'] = value
        else:
            logger.warning(f"Ignoring invalid GITALL_TIMEOUT: {timeout!r}")

    strict = os.environ.get('GITALL_STRICT')
    if strict:
        config['strict'] = strict.strip().lower() in TRUE_VALUES

    return config


def set_verbose(verbose):
    """Switch the package logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
