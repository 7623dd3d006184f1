# Path: hashify_cli/tests/unit/test_config_builder.py
"""
Unit Tests for the JSON Configuration Builder

Tests:
- Profile and config bodies
- Per-key recovery with warnings
- All-or-nothing application of config bodies
- First-wins registration
- Fatal document-level errors
"""

import logging
from decimal import Decimal

import pytest

from hashify_cli.core.errors import ArgumentError
from hashify_cli.process.config_builder import (
    ConfigCatalog,
    ConfigDocumentBuilder,
    ConfigEntry,
    ConfigProvenance,
)
from hashify_cli.process.resolver import FunctionVariable
from hashify_cli.registry.algorithms import CRCConfig, FNVConfig


@pytest.fixture
def builder(registry):
    return ConfigDocumentBuilder(registry)


class TestProfileBodies:
    """Test {"profile": ...} bodies."""

    def test_profile_entry_is_registered(self, builder, registry):
        """A known profile should produce a profile-derived entry."""
        catalog = builder.build({'CRC:Fast': {'profile': 'crc32c'}})
        entry = catalog.get(FunctionVariable(registry.find('CRC'), 'Fast'))

        assert entry.provenance is ConfigProvenance.PROFILE
        assert entry.profile_name == 'CRC32C'
        assert entry.config.polynomial == 0x1EDC6F41

    def test_unknown_profile_is_skipped(self, builder, caplog):
        """An unknown profile name should warn and register nothing."""
        with caplog.at_level(logging.WARNING):
            catalog = builder.build({'CRC': {'profile': 'NoSuchProfile'}})

        assert len(catalog) == 0
        assert 'NoSuchProfile' in caplog.text

    def test_profile_must_be_string(self, builder):
        assert len(builder.build({'CRC': {'profile': 32}})) == 0

    def test_property_names_ignore_case(self, builder):
        catalog = builder.build({'CRC': {'PROFILE': 'CRC64'}})
        assert len(catalog) == 1


class TestConfigBodies:
    """Test {"config": {...}} bodies."""

    def test_fields_are_applied(self, builder, registry):
        """Coerced fields should override the default configuration."""
        catalog = builder.build({
            'FNV1a': {'config': {
                'HashSizeInBits': 64,
                'Prime': '1099511628211',
                'Offset': '0xCBF29CE484222325',
            }}
        })
        entry = catalog.get(FunctionVariable(registry.find('FNV1a')))

        assert entry.provenance is ConfigProvenance.OVERRIDE
        assert entry.config == FNVConfig.for_width(64)

    def test_field_names_ignore_case_and_underscores(self, builder, registry):
        catalog = builder.build({'CRC': {'config': {'reflectin': False, 'Reflect_Out': False}}})
        config = catalog.get(FunctionVariable(registry.find('CRC'))).config

        assert config.reflect_in is False
        assert config.reflect_out is False

    def test_array_field(self, builder, registry):
        catalog = builder.build({'Blake2b': {'config': {'Key': [1, 2, 3]}}})
        config = catalog.get(FunctionVariable(registry.find('Blake2b'))).config
        assert config.key == (1, 2, 3)

    def test_one_bad_field_discards_the_key(self, builder, caplog):
        """No partially applied configuration should be registered."""
        with caplog.at_level(logging.ERROR):
            catalog = builder.build({
                'CRC': {'config': {'ReflectIn': False, 'HashSizeInBits': 'wide'}}
            })

        assert len(catalog) == 0
        assert 'HashSizeInBits' in caplog.text

    def test_out_of_range_value_discards_the_key(self, builder):
        catalog = builder.build({'Blake2b': {'config': {'Key': [1, 2, 300]}}})
        assert len(catalog) == 0

    def test_invalid_combination_discards_the_key(self, builder):
        """Model validation failures count as coercion failures."""
        catalog = builder.build({'CRC': {'config': {'HashSizeInBits': 65}}})
        assert len(catalog) == 0

    def test_unknown_field_is_ignored(self, builder, registry, caplog):
        with caplog.at_level(logging.WARNING):
            catalog = builder.build({'CRC': {'config': {'Bogus': 1, 'XorOut': '0'}}})

        config = catalog.get(FunctionVariable(registry.find('CRC'))).config
        assert config.xor_out == 0
        assert 'Bogus' in caplog.text

    def test_empty_config_registers_nothing(self, builder):
        assert len(builder.build({'CRC': {'config': {}}})) == 0

    def test_config_must_be_object(self, builder):
        assert len(builder.build({'CRC': {'config': [1, 2]}})) == 0

    def test_decimal_numbers_are_kept_exact(self, builder, registry):
        catalog = builder.build({'CRC': {'config': {'HashSizeInBits': Decimal('16.0')}}})
        config = catalog.get(FunctionVariable(registry.find('CRC'))).config
        assert config.hash_size_in_bits == 16


class TestKeyRecovery:
    """Test that problems with one key never stop the document."""

    def test_unknown_algorithm_is_skipped(self, builder, caplog):
        """An unknown key should warn while other keys still register."""
        with caplog.at_level(logging.WARNING):
            catalog = builder.build({
                'Whirlpool': {'profile': 'Default'},
                'CRC': {'profile': 'CRC16'},
            })

        assert len(catalog) == 1
        assert 'Whirlpool' in caplog.text

    def test_non_object_body_is_skipped(self, builder):
        assert len(builder.build({'CRC': 'CRC32', 'MD5': []})) == 0

    def test_blank_key_is_skipped(self, builder):
        assert len(builder.build({'  ': {'profile': 'CRC32'}})) == 0

    def test_both_properties_is_rejected(self, builder):
        """A body must name exactly one of profile/config."""
        catalog = builder.build({'CRC': {'profile': 'CRC32', 'config': {'XorOut': '0'}}})
        assert len(catalog) == 0

    def test_neither_property_is_rejected(self, builder):
        assert len(builder.build({'CRC': {'other': 1}})) == 0

    def test_first_entry_wins(self, builder, registry, caplog):
        """Two keys resolving to the same variable keep the first."""
        with caplog.at_level(logging.WARNING):
            catalog = builder.build({
                'CRC:Fast': {'profile': 'CRC8'},
                'crc:FAST': {'profile': 'CRC64'},
            })

        entry = catalog.get(FunctionVariable(registry.find('CRC'), 'Fast'))
        assert len(catalog) == 1
        assert entry.profile_name == 'CRC8'
        assert 'already registered' in caplog.text


class TestDocumentErrors:
    """Test fatal, document-level failures."""

    def test_non_object_root(self, builder):
        with pytest.raises(ArgumentError):
            builder.build([{'CRC': {'profile': 'CRC32'}}])

    def test_invalid_json(self, builder, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{"CRC": ', encoding='utf-8')

        with pytest.raises(ArgumentError):
            builder.load(path)

    def test_missing_file(self, builder, tmp_path):
        with pytest.raises(ArgumentError):
            builder.load(tmp_path / 'missing.json')

    def test_invalid_utf8(self, builder, tmp_path):
        path = tmp_path / 'binary.json'
        path.write_bytes(b'{"CRC": {"profile": "\xff"}}')

        with pytest.raises(ArgumentError, match='Could not read'):
            builder.load(path)

    def test_long_integer_literal_is_a_coercion_failure(self, builder, tmp_path):
        """A very long number fails its field instead of the decoder."""
        path = tmp_path / 'long.json'
        path.write_text(
            '{"CRC": {"config": {"HashSizeInBits": ' + '9' * 5000 + '}}, "MD5": {"profile": "x"}}',
            encoding='utf-8'
        )

        assert len(builder.load(path)) == 0

    def test_load_parses_floats_as_decimal(self, builder, registry, write_json, tmp_path):
        path = tmp_path / 'sizes.json'
        path.write_text('{"CRC": {"config": {"HashSizeInBits": 8.0}}}', encoding='utf-8')

        catalog = builder.load(path)
        config = catalog.get(FunctionVariable(registry.find('CRC'))).config
        assert config.hash_size_in_bits == 8

    def test_load_round_trip(self, builder, write_json):
        path = write_json({'CRC': {'profile': 'CRC32'}, 'Nope': {'profile': 'x'}})
        assert len(builder.load(path)) == 1


class TestConfigCatalog:
    """Test ConfigCatalog registration rules."""

    def test_register_rejects_duplicate(self, registry):
        variable = FunctionVariable(registry.find('CRC'))
        catalog = ConfigCatalog()

        first = ConfigEntry(variable, CRCConfig.crc8(), ConfigProvenance.PROFILE, 'CRC8')
        second = ConfigEntry(variable, CRCConfig.crc64(), ConfigProvenance.PROFILE, 'CRC64')

        assert catalog.register(first) is True
        assert catalog.register(second) is False
        assert catalog.get(variable) is first

    def test_algorithm_wide_lookup(self, registry):
        descriptor = registry.find('CRC')
        catalog = ConfigCatalog()
        entry = ConfigEntry(FunctionVariable(descriptor), CRCConfig(), ConfigProvenance.OVERRIDE)
        catalog.register(entry)

        assert catalog.algorithm_wide(descriptor) is entry
        assert catalog.get(FunctionVariable(descriptor, 'Named')) is None


class TestReadOnlyFields:
    """Test that frozen fields are never written from a document."""

    def test_read_only_field_is_ignored(self, caplog):
        from typing import Annotated

        from pydantic import Field

        from hashify_cli.registry import AlgorithmCategory, AlgorithmRegistry, DigestValue, HashConfig
        from hashify_cli.registry.algorithms import HashAlgorithm
        from hashify_cli.registry.field_types import INT32, STRING

        class LabelConfig(HashConfig):
            label: Annotated[str, STRING] = Field('fixed', frozen=True)
            size: Annotated[int, INT32] = 1

        class Label(HashAlgorithm):
            name = 'Label'
            category = AlgorithmCategory.NONCRYPTOGRAPHIC
            config_type = LabelConfig

            def _compute(self, data, config):
                return DigestValue(config.label.encode())

        registry = AlgorithmRegistry([Label()])
        with caplog.at_level(logging.WARNING):
            catalog = ConfigDocumentBuilder(registry).build(
                {'Label': {'config': {'Label': 'changed', 'Size': 2}}}
            )

        config = catalog.get(FunctionVariable(registry.find('Label'))).config
        assert config.label == 'fixed'
        assert config.size == 2
        assert 'read-only' in caplog.text


class TestRepeatedProperties:
    """Test documents that repeat a key or a property verbatim."""

    def test_repeated_key_keeps_first(self, builder, registry, tmp_path, caplog):
        """The later of two identical keys is dropped with a warning."""
        path = tmp_path / 'repeated.json'
        path.write_text(
            '{"CRC": {"profile": "CRC8"}, "CRC": {"profile": "CRC64"}}', encoding='utf-8'
        )

        with caplog.at_level(logging.WARNING):
            catalog = builder.load(path)

        entry = catalog.get(FunctionVariable(registry.find('CRC')))
        assert len(catalog) == 1
        assert entry.profile_name == 'CRC8'
        assert 'already registered' in caplog.text

    def test_repeated_body_property_is_rejected(self, builder, tmp_path):
        path = tmp_path / 'repeated.json'
        path.write_text(
            '{"CRC": {"profile": "CRC8", "profile": "CRC64"}}', encoding='utf-8'
        )
        assert len(builder.load(path)) == 0

    def test_repeated_field_keeps_first_value(self, builder, registry, tmp_path, caplog):
        path = tmp_path / 'repeated.json'
        path.write_text(
            '{"CRC": {"config": {"XorOut": "1", "xor_out": "2"}}}', encoding='utf-8'
        )

        with caplog.at_level(logging.WARNING):
            catalog = builder.load(path)

        assert catalog.get(FunctionVariable(registry.find('CRC'))).config.xor_out == 1
        assert 'more than once' in caplog.text


class TestUnmatchedConfigBodies:
    """Test config bodies whose properties set nothing."""

    def test_unknown_fields_only_registers_default(self, builder, registry, caplog):
        """A body naming only unknown fields falls back to the default config."""
        with caplog.at_level(logging.WARNING):
            catalog = builder.build({'CRC:Wide': {'config': {'Bogus': 1}}})

        entry = catalog.get(FunctionVariable(registry.find('CRC'), 'Wide'))
        assert entry.config == CRCConfig()
        assert entry.provenance is ConfigProvenance.OVERRIDE
        assert 'default configuration' in caplog.text

    def test_default_entry_still_shadows_algorithm_wide(self, builder, registry):
        catalog = builder.build({
            'CRC:Wide': {'config': {'Bogus': 1}},
            'CRC': {'profile': 'CRC64'},
        })
        assert catalog.get(FunctionVariable(registry.find('CRC'), 'Wide')).config == CRCConfig()
