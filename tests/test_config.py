import logging

import pytest

from feedforward_net.config import (
    DEFAULT_INPUT,
    DEFAULT_SIZES,
    LOG_LEVEL_ENV_VAR,
    SEED_ENV_VAR,
    NetworkConfig,
)


def test_defaults():
    config = NetworkConfig()
    assert config.seed is None
    assert config.log_level == logging.INFO
    assert len(DEFAULT_INPUT) == DEFAULT_SIZES[0]


def test_from_env_reads_seed_and_level():
    config = NetworkConfig.from_env({SEED_ENV_VAR: "42", LOG_LEVEL_ENV_VAR: "debug"})
    assert config.seed == 42
    assert config.log_level == logging.DEBUG


def test_from_env_with_nothing_set():
    assert NetworkConfig.from_env({}) == NetworkConfig()


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv(SEED_ENV_VAR, "7")
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert NetworkConfig.from_env().seed == 7


@pytest.mark.parametrize("environ", [
    {SEED_ENV_VAR: "abc"},
    {SEED_ENV_VAR: "-3"},
    {LOG_LEVEL_ENV_VAR: "LOUD"},
])
def test_from_env_rejects_bad_values(environ):
    with pytest.raises(ValueError):
        NetworkConfig.from_env(environ)


def test_same_seed_gives_same_stream():
    a = NetworkConfig(seed=5).make_rng().random(4)
    b = NetworkConfig(seed=5).make_rng().random(4)
    assert a.tolist() == b.tolist()
