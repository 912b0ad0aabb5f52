"""
Configuration tests.

Run with: pytest tests/test_config.py -v
"""

import json
import logging

import pytest

from pbcore_core.config.settings import (
    RuleConfig,
    SchemaConfig,
    ValidatorConfig,
    configure_logging,
    get_default_config,
    load_config,
    save_config,
)
from pbcore_core.validation.picklists import best_practice_rules
from pbcore_core.validation.schema import DIALECTS, get_registry
from pbcore_core.validation.validator import configure


class TestValidatorConfig:
    """Tests for dict conversion."""

    def test_defaults(self):
        config = get_default_config()
        assert config.default_dialect == "DC"
        assert config.log_level == "INFO"
        assert config.schema.schema_dir == ""
        assert config.rules.name_elements is None

    def test_from_dict_partial(self):
        config = ValidatorConfig.from_dict({
            'default_dialect': '1.3',
            'rules': {'picklists': {'creatorRole': ['Producer']}},
        })
        assert config.default_dialect == '1.3'
        assert config.rules.picklists == {'creatorRole': ['Producer']}
        assert config.rules.check_formats is True
        assert config.schema == SchemaConfig()

    def test_to_dict_from_dict(self):
        config = ValidatorConfig(
            schema=SchemaConfig(schema_dir="/srv/xsd", preload=True),
            rules=RuleConfig(list_elements=['subject']),
            default_dialect="Simple",
            custom={'station': 'WXYZ'},
        )
        assert ValidatorConfig.from_dict(config.to_dict()) == config


class TestConfigFiles:
    """Tests for loading and saving configuration files."""

    @pytest.mark.parametrize("name", ["validator.json", "validator.yaml", "validator.yml"])
    def test_save_and_load(self, tmp_path, name):
        config = ValidatorConfig(default_dialect="1.2.1",
                                 rules=RuleConfig(picklists={'titleType': ['Series']}))
        path = tmp_path / "conf" / name
        save_config(config, path)
        assert load_config(path) == config

    def test_json_written(self, tmp_path):
        path = tmp_path / "validator.json"
        save_config(get_default_config(), path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data['default_dialect'] == "DC"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "validator.ini"
        path.write_text("[x]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)
        with pytest.raises(ValueError):
            save_config(get_default_config(), tmp_path / "validator.toml")

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "validator.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == get_default_config()


class TestRuleConfig:
    """Tests for how rule settings shape the best-practice rule set."""

    def test_dialect_defaults(self):
        rules = best_practice_rules(DIALECTS["1.3"])
        assert 'creatorRole' in rules.picklists
        assert rules.name_elements == ['creator', 'contributor', 'publisher']
        assert rules.check_formats

        dc_rules = best_practice_rules(DIALECTS["DC"])
        assert list(dc_rules.picklists) == ['type']
        assert not dc_rules.check_formats

    def test_overrides(self):
        rules = best_practice_rules(DIALECTS["1.3"], RuleConfig(
            picklists={'creatorRole': ['Wizard'], 'genre': ['News']},
            list_elements=[],
            check_formats=False,
        ))
        assert rules.picklists['creatorRole'] == ['Wizard']
        assert rules.picklists['genre'] == ['News']
        assert 'titleType' in rules.picklists
        assert rules.list_elements == []
        assert not rules.check_formats


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")
    assert calls[0]['level'] == logging.DEBUG
    assert '%(levelname)s' in calls[0]['format']


def test_configure_applies_log_level_and_registry(monkeypatch, schema_dir):
    """configure() sets logging from the config and installs its registry."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    config = ValidatorConfig(
        schema=SchemaConfig(schema_dir=str(schema_dir), preload=True),
        log_level="WARNING",
    )

    registry = configure(config)

    assert calls[0]['level'] == logging.WARNING
    assert get_registry() is registry
    assert registry.schema_dir == schema_dir
    assert all(registry.is_loaded(key) for key in registry.keys())
