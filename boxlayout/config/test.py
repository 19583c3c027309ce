"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("BOXLAYOUT_JSON_INDENT", raising=False)
        assert get_environment(EnvVar.BOXLAYOUT_JSON_INDENT) == 2

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("BOXLAYOUT_JSON_INDENT", "8")
        assert get_environment(EnvVar.BOXLAYOUT_JSON_INDENT, override=4) == 4

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("BOXLAYOUT_JSON_INDENT", "0")
        result = get_environment(EnvVar.BOXLAYOUT_JSON_INDENT)
        assert result == 0
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_falls_back_to_default(self, monkeypatch):
        """Unparseable integers return the default."""
        monkeypatch.setenv("BOXLAYOUT_JSON_INDENT", "wide")
        assert get_environment(EnvVar.BOXLAYOUT_JSON_INDENT) == 2

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("BOXLAYOUT_STRICT_IDS", value)
            assert get_environment(EnvVar.BOXLAYOUT_STRICT_IDS) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("BOXLAYOUT_STRICT_IDS", value)
            assert get_environment(EnvVar.BOXLAYOUT_STRICT_IDS) is False

    @pytest.mark.unit
    def test_bool_invalid_returns_default(self, monkeypatch):
        """Invalid boolean string returns default."""
        monkeypatch.setenv("BOXLAYOUT_STRICT_IDS", "maybe")
        assert get_environment(EnvVar.BOXLAYOUT_STRICT_IDS) is False

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("BOXLAYOUT_OUTPUT_FORMAT", "tree")
        assert get_environment(EnvVar.BOXLAYOUT_OUTPUT_FORMAT) == "tree"


class TestIntrospection:
    """Tests for metadata helpers."""

    @pytest.mark.unit
    def test_environment_info(self):
        info = get_environment_info(EnvVar.BOXLAYOUT_STRICT_IDS)
        assert isinstance(info, EnvConfig)
        assert info.name == "BOXLAYOUT_STRICT_IDS"
        assert info.var_type is bool
        assert info.category == "validation"

    @pytest.mark.unit
    def test_list_all(self):
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_list_by_category(self):
        output_vars = list_environment_variables("output")
        assert EnvVar.BOXLAYOUT_JSON_INDENT in output_vars
        assert EnvVar.BOXLAYOUT_OUTPUT_FORMAT in output_vars
        assert EnvVar.BOXLAYOUT_LOG_LEVEL not in output_vars

    @pytest.mark.unit
    def test_names_match_members(self):
        """Every member's config name matches the member name."""
        for var in EnvVar:
            assert var.value.name == var.name


class TestGetLogLevel:
    """Tests for get_log_level."""

    @pytest.mark.unit
    def test_default(self, monkeypatch):
        monkeypatch.delenv("BOXLAYOUT_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.unit
    def test_env_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("BOXLAYOUT_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_override(self, monkeypatch):
        monkeypatch.setenv("BOXLAYOUT_LOG_LEVEL", "debug")
        assert get_log_level("warning") == "WARNING"
