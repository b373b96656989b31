"""
Tests for islang configuration.
"""
import pytest

from islang.config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_VECTOR_GAP, Config, ScopePolicy


def test_defaults():
    config = Config.from_env({})
    assert config == Config()
    assert config.scope_policy is ScopePolicy.LEXICAL
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.max_vector_gap == DEFAULT_MAX_VECTOR_GAP
    assert config.debug is False


def test_from_env():
    config = Config.from_env({
        'ISLANG_SCOPE': 'Shared',
        'ISLANG_MAX_DEPTH': '12',
        'ISLANG_MAX_VECTOR_GAP': '0',
        'ISLANG_DEBUG': '1',
    })
    assert config == Config(scope_policy=ScopePolicy.SHARED, max_depth=12, max_vector_gap=0,
                            debug=True)


@pytest.mark.parametrize("environ, message", [
    ({'ISLANG_SCOPE': 'dynamic'}, "ISLANG_SCOPE"),
    ({'ISLANG_MAX_DEPTH': 'deep'}, "ISLANG_MAX_DEPTH"),
    ({'ISLANG_MAX_DEPTH': '0'}, "max_depth"),
    ({'ISLANG_MAX_VECTOR_GAP': 'wide'}, "ISLANG_MAX_VECTOR_GAP"),
    ({'ISLANG_MAX_VECTOR_GAP': '-1'}, "max_vector_gap"),
])
def test_invalid_values(environ, message):
    with pytest.raises(ValueError, match=message):
        Config.from_env(environ)
