"""
Tests for config serialization and config file loading.

Configs use camelCase option names on the wire; these tests check the
mapping to AssemblyInfoConfig fields and the JSON/YAML loaders.
"""

import json

import pytest
from asminfo.errors import ConfigError
from asminfo.examples import build_example_config
from asminfo.model import AssemblyInfoConfig
from asminfo.serialization import (
    config_from_dict,
    config_from_json,
    config_from_yaml,
    config_to_dict,
    config_to_json,
    config_to_yaml,
    load_config,
)


class TestConfigFromDict:
    """Test building configs from option mappings."""

    def test_camel_case_options(self):
        """camelCase option names map to dataclass fields."""
        config = config_from_dict({
            "outputFile": "info.cs",
            "companyName": "Contoso",
            "productName": "Billing",
            "comVisible": False,
            "comGuid": "guid",
            "fileVersion": "1.0.0.1",
        })
        assert config.output_file == "info.cs"
        assert config.company_name == "Contoso"
        assert config.product_name == "Billing"
        assert config.com_visible is False
        assert config.com_guid == "guid"
        assert config.file_version == "1.0.0.1"

    def test_snake_case_fields_accepted(self):
        """Dataclass field names work as keys too."""
        config = config_from_dict({"output_file": "info.cs", "company_name": "Contoso"})
        assert config.output_file == "info.cs"
        assert config.company_name == "Contoso"

    def test_missing_keys_stay_unset(self):
        """An empty mapping gives the default config."""
        config = config_from_dict({})
        assert config == AssemblyInfoConfig()

    def test_namespaces_become_tuple(self):
        """Namespaces are stored as a tuple, duplicates kept."""
        config = config_from_dict({"namespaces": ["a", "b", "a"]})
        assert config.namespaces == ("a", "b", "a")

    def test_namespaces_must_be_a_list(self):
        """A bare string is rejected for namespaces."""
        with pytest.raises(ConfigError):
            config_from_dict({"namespaces": "System.Xml"})

    def test_custom_attributes_must_be_a_mapping(self):
        """customAttributes must be a mapping."""
        with pytest.raises(ConfigError):
            config_from_dict({"customAttributes": ["test"]})

    def test_custom_attribute_order_preserved(self):
        """customAttributes keep their order."""
        config = config_from_dict({"customAttributes": {"z": "1", "a": "empty", "m": True}})
        assert list(config.custom_attributes) == ["z", "a", "m"]

    def test_unknown_option_warns(self):
        """Unknown keys are ignored with a warning."""
        with pytest.warns(UserWarning, match="outputfile"):
            config = config_from_dict({"outputfile": "info.cs"})
        assert config.output_file is None

    def test_non_mapping_rejected(self):
        """Only mappings can become configs."""
        with pytest.raises(ConfigError):
            config_from_dict(["outputFile"])

    def test_text_option_must_be_a_string(self):
        """Numbers and booleans are rejected for text options."""
        with pytest.raises(ConfigError, match="fileVersion"):
            config_from_dict({"fileVersion": 2})
        with pytest.raises(ConfigError, match="title"):
            config_from_dict({"title": True})

    def test_com_visible_must_be_a_boolean(self):
        """comVisible only accepts true or false."""
        with pytest.raises(ConfigError, match="comVisible"):
            config_from_dict({"comVisible": "yes"})


class TestConfigToDict:
    """Test converting configs back to option mappings."""

    def test_unset_fields_omitted(self):
        """Unset fields are left out of the mapping."""
        d = config_to_dict(AssemblyInfoConfig(output_file="info.cs", com_visible=False))
        assert d == {"outputFile": "info.cs", "comVisible": False}

    def test_example_config_survives_dict(self):
        """Converting to a mapping and back loses nothing."""
        config = build_example_config()
        assert config_from_dict(config_to_dict(config)) == config


class TestTextFormats:
    """Test JSON and YAML parsing."""

    def test_from_json(self):
        """JSON booleans and strings load as is."""
        config = config_from_json('{"outputFile": "info.cs", "language": "vb", "comVisible": true}')
        assert config.language == "vb"
        assert config.com_visible is True

    def test_to_json_uses_option_names(self):
        """JSON output uses camelCase option names."""
        d = json.loads(config_to_json(AssemblyInfoConfig(output_file="info.cs", company_name="C")))
        assert d == {"outputFile": "info.cs", "companyName": "C"}

    def test_from_yaml(self):
        """YAML lists and mappings load as namespaces and custom attributes."""
        config = config_from_yaml(
            "outputFile: info.cs\n"
            "namespaces:\n"
            "  - test\n"
            "  - test2\n"
            "customAttributes:\n"
            "  test: empty\n"
            "  test2: value\n"
        )
        assert config.namespaces == ("test", "test2")
        assert config.custom_attributes == {"test": "empty", "test2": "value"}

    def test_yaml_keeps_custom_attribute_order(self):
        """YAML output keeps custom attribute order."""
        config = AssemblyInfoConfig(output_file="info.cs", custom_attributes={"z": "1", "a": "2"})
        text = config_to_yaml(config)
        assert text.index("z:") < text.index("a:")
        assert config_from_yaml(text) == config

    def test_invalid_json(self):
        """Malformed JSON raises ConfigError."""
        with pytest.raises(ConfigError):
            config_from_json("{not json")

    def test_invalid_yaml(self):
        """Malformed YAML raises ConfigError."""
        with pytest.raises(ConfigError):
            config_from_yaml("outputFile: [unclosed")

    def test_yaml_scalar_is_not_a_config(self):
        """A YAML document that is not a mapping is rejected."""
        with pytest.raises(ConfigError):
            config_from_yaml("just a string")

    def test_unquoted_version_rejected(self):
        """YAML reads 1.10 as the float 1.1; that must not reach the output."""
        with pytest.raises(ConfigError, match="version must be a string.*quote the value"):
            config_from_yaml("outputFile: a.cs\nversion: 1.10\n")

    def test_quoted_version_kept_verbatim(self):
        """A quoted version keeps its trailing zero."""
        config = config_from_yaml("outputFile: a.cs\nversion: \"1.10\"\n")
        assert config.version == "1.10"


class TestLoadConfig:
    """Test loading config files by suffix."""

    def test_load_json_file(self, tmp_path):
        """.json files are parsed as JSON."""
        path = tmp_path / "assemblyinfo.json"
        path.write_text('{"outputFile": "info.cs", "title": "title"}', encoding="utf-8")
        config = load_config(path)
        assert config.title == "title"

    def test_load_yaml_file(self, tmp_path):
        """.yml files are parsed as YAML."""
        path = tmp_path / "assemblyinfo.yml"
        path.write_text("outputFile: info.vb\nlanguage: vb\n", encoding="utf-8")
        config = load_config(str(path))
        assert config.output_file == "info.vb"
        assert config.language == "vb"

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_file_not_utf8(self, tmp_path):
        """Undecodable bytes raise ConfigError, not UnicodeDecodeError."""
        path = tmp_path / "assemblyinfo.json"
        path.write_bytes(b'{"outputFile": "\xff"}')
        with pytest.raises(ConfigError, match="Cannot read config file"):
            load_config(path)
