"""
Configuration
=============
Runtime options for building and evaluating a network.

Recognised options:
    seed (int | None): seeds the generator used for the initial weights and
        biases. ``None`` draws fresh entropy, so every run differs.
    log_level (int): logging level used by the reference driver.

Both can be read from the environment through ``NetworkConfig.from_env``:
``FEEDFORWARD_NET_SEED`` and ``FEEDFORWARD_NET_LOG_LEVEL`` (e.g. ``DEBUG``).
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np

SEED_ENV_VAR = "FEEDFORWARD_NET_SEED"
LOG_LEVEL_ENV_VAR = "FEEDFORWARD_NET_LOG_LEVEL"

# Reference program: topology and the single input it evaluates
DEFAULT_SIZES = (6, 3, 3, 1)
DEFAULT_INPUT = (0.9, 0.8, 0.6, 0.3, 0.1, 0.1)


@dataclass(frozen=True)
class NetworkConfig:
    seed: Optional[int] = None
    log_level: int = logging.INFO

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NetworkConfig":
        """
        Build a config from environment variables.

        Raises:
            ValueError: if the seed is not an integer or the level name is unknown.
        """
        environ = os.environ if environ is None else environ

        seed = None
        raw_seed = environ.get(SEED_ENV_VAR, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw_seed!r}") from None
            if seed < 0:
                raise ValueError(f"{SEED_ENV_VAR} must be non-negative, got {seed}")

        log_level = logging.INFO
        raw_level = environ.get(LOG_LEVEL_ENV_VAR, "").strip()
        if raw_level:
            level = logging.getLevelName(raw_level.upper())
            if not isinstance(level, int):
                raise ValueError(f"{LOG_LEVEL_ENV_VAR} is not a logging level: {raw_level!r}")
            log_level = level

        return cls(seed=seed, log_level=log_level)
