"""Utility modules: config, logging, errors."""
import os
import logging
import sys
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from .version import UNICODE_VERSION, validate_version_format

# Load .env file for local development
load_dotenv()

logger = logging.getLogger(__name__)


# ============================================================================
# ERRORS
# ============================================================================

class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


class FetchError(Exception):
    """Raised when the emoji registry cannot be downloaded or read."""
    pass


class SnippetStoreError(Exception):
    """Raised when a single snippet cannot be written to the archive."""
    pass


# ============================================================================
# CONFIGURATION
# ============================================================================

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')
TRUE_VALUES = ('true', '1', 'yes')
FALSE_VALUES = ('false', '0', 'no', '')


def parse_bool(value: str) -> Optional[bool]:
    """Parse a boolean environment value, None if unrecognized."""
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


def load_config(log_level: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration values from environment variables.

    Every variable is optional; the defaults reproduce a plain run that
    downloads Unicode 13.0 and writes the pack to the current directory.

    Args:
        log_level: Level chosen on the command line. When given, LOG_LEVEL
            is neither read nor validated.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If any configuration value is malformed
    """
    env_vars = {
        'unicode_version': ('EMOJI_UNICODE_VERSION', UNICODE_VERSION),
        'output_dir': ('EMOJI_OUTPUT_DIR', '.'),
        'strip_emoji_version': ('EMOJI_STRIP_VERSION', 'false'),
        'http_timeout': ('EMOJI_HTTP_TIMEOUT', ''),
        'log_level': ('LOG_LEVEL', 'INFO'),
    }

    raw = {}
    for key, (env_var, default) in env_vars.items():
        raw[key] = os.getenv(env_var, default).strip() or default

    config = {}
    invalid = []

    if validate_version_format(raw['unicode_version']):
        config['unicode_version'] = raw['unicode_version']
    else:
        invalid.append('EMOJI_UNICODE_VERSION')

    config['output_dir'] = raw['output_dir']

    strip = parse_bool(raw['strip_emoji_version'])
    if strip is None:
        invalid.append('EMOJI_STRIP_VERSION')
    config['strip_emoji_version'] = bool(strip)

    config['http_timeout'] = None
    if raw['http_timeout']:
        try:
            timeout = float(raw['http_timeout'])
        except ValueError:
            timeout = 0
        if timeout > 0:
            config['http_timeout'] = timeout
        else:
            invalid.append('EMOJI_HTTP_TIMEOUT')

    if log_level:
        config['log_level'] = log_level.upper()
    elif raw['log_level'].upper() in LOG_LEVELS:
        config['log_level'] = raw['log_level'].upper()
    else:
        invalid.append('LOG_LEVEL')

    if invalid:
        raise ConfigError(f"Invalid environment variables: {invalid}")

    logger.debug(f"Configuration loaded: {config}")
    return config


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(level: str = "INFO", structured: bool = False) -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        formatter = logging.Formatter('%(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Diagnostics go to stderr, stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)
