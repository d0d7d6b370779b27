"""
Configuration

Default parameters for the RC6 cipher and the environment overrides
recognised by the library.
"""

import os
import logging
from typing import Optional

# Default parameters for RC6-32/20
RC6_DEFAULT_PARAMS = {
    'rounds': 20,      # Number of mixing rounds
    'block_size': 16,  # Block size in bytes (128 bits)
    'key_size': 16,    # Generated key size in bytes
    'iv_size': 16      # CBC IV size in bytes
}

ROUNDS_ENV_VAR = 'RC6CIPHER_ROUNDS'
LOG_LEVEL_ENV_VAR = 'RC6CIPHER_LOG_LEVEL'


def get_default_rounds() -> int:
    """
    Return the default round count, honouring RC6CIPHER_ROUNDS.

    Returns:
        The round count to use when a caller does not give one

    Raises:
        ValueError: If the environment override is not a positive integer
    """
    env_rounds = os.environ.get(ROUNDS_ENV_VAR)
    if not env_rounds:
        return RC6_DEFAULT_PARAMS['rounds']

    try:
        rounds = int(env_rounds)
    except ValueError:
        raise ValueError(f"{ROUNDS_ENV_VAR} must be an integer, got {env_rounds!r}")

    if rounds < 1:
        raise ValueError(f"{ROUNDS_ENV_VAR} must be positive, got {rounds}")
    return rounds


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and demos.

    Args:
        level: Level name; defaults to RC6CIPHER_LOG_LEVEL or INFO
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, 'INFO')
    logging.basicConfig(level=level.upper())
