"""Shared pytest fixtures for the docs parser test suite.

Provides configuration isolation and a markdown tokenizer fixture used
across all test modules.
"""

import textwrap
from collections.abc import Iterator

import pytest
from markdown_it.token import Token

from packages.common.config import DocsParserConfig, get_config
from packages.markdown.tokens import tokenize
from tests.utils.tokens import Tokenizer

# ========== Configuration Fixtures ==========


@pytest.fixture(autouse=True)
def clear_config_cache() -> Iterator[None]:
    """Drop the cached settings so each test sees its own environment."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def test_config() -> DocsParserConfig:
    """Provide a configuration with the default tokenizer options.

    Returns:
        DocsParserConfig: Configuration instance for testing.
    """
    return DocsParserConfig(markdown_preset="commonmark", enable_strikethrough=True)


# ========== Markdown Fixtures ==========


@pytest.fixture
def md(test_config: DocsParserConfig) -> Tokenizer:
    """Tokenize a dedented markdown snippet.

    Returns:
        Tokenizer: Function turning markdown into tokens.
    """

    def _tokenize(markdown: str) -> list[Token]:
        return tokenize(textwrap.dedent(markdown).lstrip("\n"), test_config)

    return _tokenize
