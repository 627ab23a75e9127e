"""
Tests for configuration loading.
"""

import pytest

from arma_xgettext.core.config import ExtractorConfig, find_config, load_config
from arma_xgettext.core.errors import ConfigError, FlagSpecError, KeywordSpecError
from arma_xgettext.core.flags import FormatDecision


class TestExtractorConfig:
    """Test the configuration dataclass."""

    def test_defaults(self):
        config = ExtractorConfig()
        assert config.keywords == []
        assert config.default_keywords is True
        assert config.add_comments is None
        assert config.output_format == "po"

    def test_from_dict_accepts_dashes(self):
        config = ExtractorConfig.from_dict({"default-keywords": False, "add-comments": "TR:"})
        assert config.default_keywords is False
        assert config.add_comments == "TR:"

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="unknown option 'colour'"):
            ExtractorConfig.from_dict({"colour": "red"})

    def test_wrong_type(self):
        with pytest.raises(ConfigError, match="'keywords' must be a list of strings"):
            ExtractorConfig.from_dict({"keywords": "STRT"})

    def test_unknown_output_format(self):
        with pytest.raises(ConfigError, match="unknown output format"):
            ExtractorConfig.from_dict({"output-format": "xml"})

    def test_to_options(self):
        options = ExtractorConfig(keywords=["STRT:1"], flags=["hint:1:arma-format"]).to_options()
        assert "STRT" in options.keywords
        assert "localize" in options.keywords
        assert options.flags.lookup("hint").advance().is_format == FormatDecision.YES
        assert options.flags.lookup("format").advance().is_format == FormatDecision.YES

    def test_to_options_without_defaults(self):
        options = ExtractorConfig(keywords=["STRT"], default_keywords=False).to_options()
        assert list(options.keywords) == ["STRT"]

    def test_bad_keyword(self):
        with pytest.raises(KeywordSpecError):
            ExtractorConfig(keywords=["foo:x"]).to_options()

    def test_bad_flag(self):
        with pytest.raises(FlagSpecError):
            ExtractorConfig(flags=["hint"]).to_options()

    def test_new_catalog_uses_comment_tag(self):
        assert ExtractorConfig(add_comments="TR:").new_catalog().comment_tag == "TR:"


class TestLoadConfig:
    """Test reading configuration files."""

    def test_no_file_gives_defaults(self, tmp_path):
        assert load_config(search_dir=tmp_path) == ExtractorConfig()

    def test_dedicated_file(self, tmp_path):
        (tmp_path / "arma-xgettext.toml").write_text(
            'keywords = ["STRT:1"]\nextract-all = true\n', encoding="utf-8"
        )
        config = load_config(search_dir=tmp_path)
        assert config.keywords == ["STRT:1"]
        assert config.extract_all is True

    def test_pyproject_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "mod"\n\n[tool.arma-xgettext]\nexclude = ["addons/dev/"]\n',
            encoding="utf-8",
        )
        assert find_config(tmp_path) == tmp_path / "pyproject.toml"
        assert load_config(search_dir=tmp_path).exclude == ["addons/dev/"]

    def test_pyproject_without_table_is_ignored(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "mod"\n', encoding="utf-8")
        assert find_config(tmp_path) is None

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('flags = ["hint:1:arma-format"]\n', encoding="utf-8")
        assert load_config(path).flags == ["hint:1:arma-format"]

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "arma-xgettext.toml"
        path.write_text("keywords = [", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
