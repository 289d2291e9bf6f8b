"""Pytest fixtures for test configuration.

Global test safety measures:
 - Strip CMDSCORE__ variables inherited from the developer shell so that
   configuration tests start from the built-in defaults
"""
import pytest
import os
from typing import Dict, Any

from cmdscore.config import ENV_PREFIX
from cmdscore.match.memo import MemoPool


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv('CMDSCORE_ENABLE_DOTENV', raising=False)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests should pass cfg to the CLI via ``obj=`` rather than setting
    environment variables. Values mirror the built-in defaults.
    """
    return {
        'log_level': 'DEBUG',
        'scoring': {
            'score_continue_match': 1.0,
            'score_space_word_jump': 0.9,
            'score_non_space_word_jump': 0.8,
            'score_character_jump': 0.3,
            'score_transposition': 0.1,
            'penalty_skipped': 0.999,
            'penalty_case_mismatch': 0.9999,
            'penalty_not_complete': 0.99,
        },
        'pool': {
            'enabled': True,
            'max_idle': 4,
        },
    }


@pytest.fixture
def memo_pool() -> MemoPool:
    return MemoPool(max_idle=4)
