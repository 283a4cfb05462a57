import pytest
from pydantic import ValidationError

from sfcplay.compiler.template_validator import TemplateValidator
from sfcplay.schema.descriptor import TrustLevel
from sfcplay.services.settings.base import CompilerSettings
from sfcplay.services.settings.service import SettingsService


def test_defaults():
    settings = CompilerSettings()

    assert settings.directive_prefix == "v-"
    assert settings.valueless_directives == ["v-else", "v-cloak", "v-pre", "v-once", "v-slot"]
    assert settings.setup_bindings == ["ref", "computed", "watch", "onMounted"]
    assert settings.trust_level is TrustLevel.UNTRUSTED
    assert settings.warn_on_unrecognized_script is True


def test_comma_separated_lists_from_environment(monkeypatch):
    monkeypatch.setenv("SFCPLAY_VALUELESS_DIRECTIVES", "v-else, v-slot,")

    assert CompilerSettings().valueless_directives == ["v-else", "v-slot"]


def test_scalar_values_from_environment(monkeypatch):
    monkeypatch.setenv("SFCPLAY_TRUST_LEVEL", "trusted")
    monkeypatch.setenv("SFCPLAY_WARN_ON_UNRECOGNIZED_SCRIPT", "false")
    monkeypatch.setenv("SFCPLAY_DIRECTIVE_PREFIX", "x-")

    settings = CompilerSettings()

    assert settings.trust_level is TrustLevel.TRUSTED
    assert settings.warn_on_unrecognized_script is False
    assert settings.directive_prefix == "x-"


def test_init_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("SFCPLAY_SETUP_BINDINGS", "ref")

    assert CompilerSettings(setup_bindings=["reactive"]).setup_bindings == ["reactive"]


def test_invalid_binding_name_is_rejected(monkeypatch):
    monkeypatch.setenv("SFCPLAY_SETUP_BINDINGS", "ref,1bad")

    with pytest.raises(ValidationError, match="Invalid setup binding names: 1bad"):
        CompilerSettings()


def test_duplicate_bindings_are_collapsed_in_order():
    settings = CompilerSettings(setup_bindings=["watch", "ref", "watch"])

    assert settings.setup_bindings == ["watch", "ref"]


@pytest.mark.parametrize("prefix", ["", "v -"])
def test_directive_prefix_must_be_a_token(prefix):
    with pytest.raises(ValidationError, match="directive_prefix"):
        CompilerSettings(directive_prefix=prefix)


def test_settings_service_set_validates_assignment():
    service = SettingsService(CompilerSettings())

    assert service.set("trust_level", "trusted").trust_level is TrustLevel.TRUSTED
    with pytest.raises(ValidationError):
        service.set("directive_prefix", " ")


def test_custom_prefix_changes_directive_checks():
    validator = TemplateValidator(CompilerSettings(directive_prefix="x-", valueless_directives=[]))

    result = validator.validate('<div x-show v-show><p x-if="a">b</p></div>')

    assert result.errors == ["Invalid directive syntax: x-show"]
