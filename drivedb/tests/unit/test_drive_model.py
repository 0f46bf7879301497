# Path: drivedb/tests/unit/test_drive_model.py
"""
Unit Tests for Drive Models

Tests AttributeOverride, ModelDefinition and ResolvedModel.
"""

import re

import pytest
from pydantic import ValidationError

from drivedb.process.resolver.models import (
    AttributeOverride,
    ModelDefinition,
    ResolvedModel,
)


class TestAttributeOverride:
    """Test AttributeOverride."""

    def test_defaults_empty(self):
        override = AttributeOverride()
        assert override.conv == ''
        assert override.name == ''

    def test_is_frozen(self):
        override = AttributeOverride(conv='raw48', name='Power_On_Hours')
        with pytest.raises(ValidationError):
            override.name = 'Changed'

    def test_null_name_becomes_empty(self):
        override = AttributeOverride.model_validate({'conv': 'raw48', 'name': None})
        assert override.name == ''

    def test_equality_by_value(self):
        assert AttributeOverride(conv='raw48', name='A') == AttributeOverride(conv='raw48', name='A')
        assert AttributeOverride(conv='raw48', name='A') != AttributeOverride(conv='raw16', name='A')


class TestModelDefinition:
    """Test ModelDefinition."""

    def test_from_record(self):
        definition = ModelDefinition.model_validate({
            'family': 'Seagate Barracuda 7200.14 (AF)',
            'model_regex': 'ST3000DM00[1-3]-.*',
            'firmware_regex': '',
            'warning': None,
            'presets': {'190': {'conv': 'raw48', 'name': ''}},
        })

        assert definition.family == 'Seagate Barracuda 7200.14 (AF)'
        assert definition.warning == ''
        assert definition.presets == {'190': AttributeOverride(conv='raw48', name='')}
        assert definition.compiled_regex is None

    def test_integer_preset_keys_become_strings(self):
        definition = ModelDefinition.model_validate({
            'family': 'X',
            'presets': {9: {'conv': 'raw48', 'name': 'Power_On_Hours'}, 190: None},
        })

        assert set(definition.presets) == {'9', '190'}
        assert definition.presets['190'] == AttributeOverride()

    def test_null_presets_become_empty(self):
        definition = ModelDefinition.model_validate({'family': 'X', 'presets': None})
        assert definition.presets == {}

    def test_numeric_family_becomes_text(self):
        definition = ModelDefinition.model_validate({'family': 2000})
        assert definition.family == '2000'

    def test_boolean_text_fields_become_text(self):
        override = AttributeOverride.model_validate({'conv': 'raw48', 'name': True})
        definition = ModelDefinition.model_validate({'family': False})

        assert override.name == 'true'
        assert definition.family == 'false'

    def test_compiled_regex_key_ignored(self):
        definition = ModelDefinition.model_validate(
            {'family': 'DEFAULT', 'compiled_regex': re.compile('.*')}
        )

        assert definition.compiled_regex is None

    def test_invalid_presets_rejected(self):
        with pytest.raises(ValidationError):
            ModelDefinition.model_validate({'family': 'X', 'presets': ['190', 'raw48']})

    def test_is_default(self):
        assert ModelDefinition(family='DEFAULT').is_default
        assert not ModelDefinition(family='default').is_default
        assert not ModelDefinition(family='Seagate').is_default

    def test_is_placeholder(self):
        assert ModelDefinition(family='$Id$').is_placeholder
        assert ModelDefinition(family='$Id: drivedb.h 4842 $').is_placeholder
        assert not ModelDefinition(family='Id').is_placeholder
        assert not ModelDefinition(family='DEFAULT').is_placeholder

    def test_compile_returns_copy(self):
        definition = ModelDefinition(family='Seagate', model_regex='^ST[0-9]+')
        compiled = definition.compile()

        assert definition.compiled_regex is None
        assert isinstance(compiled.compiled_regex, re.Pattern)
        assert compiled.family == 'Seagate'

    def test_compile_invalid_pattern(self):
        with pytest.raises(re.error):
            ModelDefinition(family='Broken', model_regex='ST[0-9').compile()

    def test_compile_overflowing_repeat_count(self):
        with pytest.raises(OverflowError):
            ModelDefinition(family='Big', model_regex='a{4294967296}').compile()

    def test_matches(self):
        definition = ModelDefinition(family='Seagate', model_regex='DM00[1-3]').compile()

        assert definition.matches('ST3000DM001-9YN166')
        assert not definition.matches('WDC WD40EFRX')

    def test_uncompiled_never_matches(self):
        assert not ModelDefinition(family='Any', model_regex='.*').matches('anything')

    def test_compiled_pattern_not_serialized(self):
        definition = ModelDefinition(family='Seagate', model_regex='ST').compile()
        assert 'compiled_regex' not in definition.model_dump()


class TestResolvedModel:
    """Test ResolvedModel."""

    def test_empty_by_default(self):
        model = ResolvedModel()
        assert model.presets == {}
        assert not model.matched

    def test_get_preset_accepts_int(self):
        model = ResolvedModel(presets={'9': AttributeOverride(conv='raw48', name='Hours')})

        assert model.get_preset(9) == model.get_preset('9')
        assert model.get_preset(10) is None

    def test_to_dict(self):
        model = ResolvedModel(
            family='Seagate',
            model_regex='^ST',
            warning='check firmware',
            presets={'9': AttributeOverride(conv='raw48', name='Hours')},
        )

        assert model.to_dict() == {
            'family': 'Seagate',
            'model_regex': '^ST',
            'firmware_regex': '',
            'warning': 'check firmware',
            'presets': {'9': {'conv': 'raw48', 'name': 'Hours'}},
        }

    def test_presets_not_shared_between_instances(self):
        first = ResolvedModel()
        second = ResolvedModel()
        first.presets['9'] = AttributeOverride()

        assert second.presets == {}
