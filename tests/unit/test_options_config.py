#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for options construction and configuration file loading."""

import json

import pytest

from docdirectives.config import (
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    load_pipeline_options,
    merge_configs,
)
from docdirectives.exceptions import ConfigError, ValidationError
from docdirectives.options import (
    CalloutOptions,
    HeadingIdOptions,
    LinkPreviewOptions,
    PipelineOptions,
)

TOML_CONFIG = """
transforms = ["callout", "heading-ids"]

[callout]
default_variant = "info"
aliases = { note = "info", caution = "warning" }

[embed.providers]
loom = "https://www.loom.com/embed/{id}"

[link_preview]
exclude_domains = ["internal.example.com"]
fail_on_invalid_url = false
"""


@pytest.mark.unit
class TestOptionsFromDict:
    """Tests for building options from mappings."""

    def test_callout_from_dict(self):
        """Test callout options from a table."""
        options = CalloutOptions.from_dict({"default_variant": "warning", "title_override": "Note"})

        assert options.default_variant == "warning"
        assert options.title_override == "Note"

    def test_unknown_key_rejected(self):
        """Test unknown option keys are rejected with the key name."""
        with pytest.raises(ValidationError) as exc_info:
            HeadingIdOptions.from_dict({"prefix": "x"})

        assert exc_info.value.parameter_name == "prefix"

    def test_metadata_source_not_configurable(self):
        """Test callables cannot be set from configuration."""
        with pytest.raises(ValidationError):
            LinkPreviewOptions.from_dict({"metadata_source": "module:function"})

    def test_exclude_domains_normalized(self):
        """Test a single string and empty entries are normalized."""
        assert LinkPreviewOptions(exclude_domains="example.com").exclude_domains == ("example.com",)
        assert LinkPreviewOptions(exclude_domains=["a.com", ""]).exclude_domains == ("a.com",)

    def test_pipeline_from_dict(self):
        """Test pipeline options from nested tables."""
        options = PipelineOptions.from_dict(
            {
                "transforms": ["embed"],
                "embed": {"providers": {"loom": "https://loom/{id}"}},
                "heading_ids": {"id_prefix": "doc-"},
            }
        )

        assert options.transforms == ("embed",)
        assert "loom" in options.embed.provider_table
        assert options.heading_ids.id_prefix == "doc-"
        assert options.callout == CalloutOptions()

    def test_pipeline_unknown_section(self):
        """Test unknown sections are rejected."""
        with pytest.raises(ValidationError, match="linkpreview"):
            PipelineOptions.from_dict({"linkpreview": {}})

    def test_pipeline_section_must_be_table(self):
        """Test a section must be a mapping."""
        with pytest.raises(ValidationError, match="must be a table"):
            PipelineOptions.from_dict({"callout": "info"})

    def test_create_updated(self):
        """Test create_updated returns a new, validated instance."""
        options = CalloutOptions()
        updated = options.create_updated(default_variant="danger")

        assert options.default_variant == "default"
        assert updated.default_variant == "danger"
        with pytest.raises(ValidationError):
            options.create_updated(default_variant="purple")


@pytest.mark.unit
class TestConfigFiles:
    """Tests for configuration file loading."""

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / ".docdirectives.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")

        config = load_config_file(path)

        assert config["transforms"] == ["callout", "heading-ids"]
        assert config["callout"]["aliases"]["caution"] == "warning"

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text("callout:\n  default_variant: info\n", encoding="utf-8")

        assert load_config_file(path) == {"callout": {"default_variant": "info"}}

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file is an empty configuration."""
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"heading_ids": {"id_prefix": "x-"}}), encoding="utf-8")

        assert load_config_file(path)["heading_ids"]["id_prefix"] == "x-"

    def test_pyproject_section(self, tmp_path):
        """Test only the [tool.docdirectives] table is read from pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[project]\nname = "site"\n\n[tool.docdirectives.callout]\ndefault_variant = "success"\n',
            encoding="utf-8",
        )

        assert load_config_file(path) == {"callout": {"default_variant": "success"}}

    def test_pyproject_without_section(self, tmp_path):
        """Test a pyproject.toml without the table is an empty configuration."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n', encoding="utf-8")

        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test an unknown extension raises ConfigError."""
        path = tmp_path / "config.ini"
        path.write_text("[callout]\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Unsupported"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename,content",
        [("bad.toml", "callout = [\n"), ("bad.json", "{not json"), ("bad.yaml", "a: [1, 2"), ("list.json", "[1]")],
    )
    def test_invalid_content(self, tmp_path, filename, content):
        """Test malformed files raise ConfigError with the path."""
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)

        assert exc_info.value.config_path == str(path)

    def test_find_in_parents(self, tmp_path):
        """Test discovery walks up from the starting directory."""
        (tmp_path / ".docdirectives.yaml").write_text("{}\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == (tmp_path / ".docdirectives.yaml").resolve()

    def test_priority_explicit_then_env(self, isolated_config, monkeypatch):
        """Test an explicit path beats the environment variable."""
        explicit = isolated_config / "explicit.json"
        explicit.write_text('{"heading_ids": {"id_prefix": "e-"}}', encoding="utf-8")
        from_env = isolated_config / "env.json"
        from_env.write_text('{"heading_ids": {"id_prefix": "v-"}}', encoding="utf-8")
        monkeypatch.setenv("DOCDIRECTIVES_CONFIG", str(from_env))

        assert load_config_with_priority(str(explicit))["heading_ids"]["id_prefix"] == "e-"
        assert load_config_with_priority()["heading_ids"]["id_prefix"] == "v-"

    def test_no_config_found(self, isolated_config):
        """Test an empty configuration when nothing is found."""
        assert load_config_with_priority() == {}

    def test_load_pipeline_options(self, tmp_path):
        """Test a config file becomes PipelineOptions."""
        path = tmp_path / ".docdirectives.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")

        options = load_pipeline_options(path)

        assert options.transforms == ("callout", "heading-ids")
        assert options.callout.aliases["note"] == "info"
        assert options.embed.provider_table["loom"].src("abc") == "https://www.loom.com/embed/abc"
        assert options.link_preview.exclude_domains == ("internal.example.com",)
        assert options.link_preview.fail_on_invalid_url is False

    def test_load_pipeline_options_invalid(self, tmp_path):
        """Test invalid option values become ConfigError."""
        path = tmp_path / "config.json"
        path.write_text('{"callout": {"default_variant": "purple"}}', encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid configuration") as exc_info:
            load_pipeline_options(path)

        assert isinstance(exc_info.value.original_error, ValidationError)

    def test_merge_configs(self):
        """Test nested tables are merged recursively."""
        merged = merge_configs(
            {"callout": {"default_variant": "info"}, "transforms": ["callout"]},
            {"callout": {"title_override": "Note"}, "transforms": ["embed"]},
        )

        assert merged == {
            "callout": {"default_variant": "info", "title_override": "Note"},
            "transforms": ["embed"],
        }
