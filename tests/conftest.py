"""
Shared fixtures for the extractor tests.
"""

import pytest

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.flags import DEFAULT_FLAGS, FlagContextTable
from arma_xgettext.core.keywords import build_keyword_table
from arma_xgettext.core.scanner import ScanOptions, extract_string


@pytest.fixture
def extract():
    """Run the extractor over a source string and return the catalog."""

    def _extract(
        text,
        keywords=(),
        default_keywords=True,
        flags=(),
        extract_all=False,
        comment_tag=None,
        file_name="test.sqf",
    ):
        options = ScanOptions(
            keywords=build_keyword_table(keywords, default_keywords=default_keywords),
            flags=FlagContextTable(DEFAULT_FLAGS + tuple(flags)),
            extract_all=extract_all,
        )
        return extract_string(text, file_name, options, Catalog(comment_tag=comment_tag))

    return _extract
