"""
Pytest configuration and shared fixtures
"""

from pathlib import Path

import pytest

from blogindex.config import Config
from blogindex.extraction import MetadataExtractor
from blogindex.index import IndexBuilder
from blogindex.summary import ContentSummarizer, create_converter


@pytest.fixture
def articles_root(tmp_path):
    """Empty articles directory"""
    root = tmp_path / "articles"
    root.mkdir()
    return root


@pytest.fixture
def write_article(articles_root):
    """Write an article source under the articles root and return its path"""

    def _write(relative_path: str, text: str) -> Path:
        path = articles_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def summarizer():
    """Summarizer with default budgets"""
    return ContentSummarizer(create_converter())


@pytest.fixture
def builder(summarizer):
    """Index builder that does not print warnings"""
    return IndexBuilder(MetadataExtractor(), summarizer, verbose=False)


@pytest.fixture
def config(tmp_path):
    """Config rooted in tmp_path with no config file on disk"""
    return Config(tmp_path / "blogindex.yaml")


@pytest.fixture
def front_matter_article():
    """Article using a leading key: value block"""
    return (
        "---\n"
        "title: 开篇\n"
        "cover: /covers/hello-world.jpg\n"
        "date: 2025-11-25\n"
        "tags:\n"
        "  - 随笔\n"
        "---\n"
        "道生一，一生二。\n"
    )


@pytest.fixture
def inline_tag_article():
    """Article using a leading self-closing attribute tag"""
    return (
        '<meta title="诗" cover="/covers/libai.jpg" date="2025-12-05" tags="随笔， 古诗" />\n'
        "\n"
        "朝辞白帝彩云间，千里江陵一日还。\n"
    )
