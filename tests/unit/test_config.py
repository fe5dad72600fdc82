"""Unit tests for configuration schema, loader, validator and adapter.

These tests verify:
- Valid configurations are loaded with their defaults
- Unknown fields and bad values are rejected with JSON paths
- Loader error categories (file not found, JSON parse, validation)
- Option combination errors and section advisories
- Conversion to the QuoteRequest DTO
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from railquote.application.config import (
    ConfigError,
    QuoteConfiguration,
    SectionConfigSchema,
    config_to_request,
    load_config,
    load_config_from_dict,
    validate_config,
)
from railquote.domain.value_objects import (
    InfillType,
    PicketStyle,
    RailingEndType,
    RailStyle,
    SectionType,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _config(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"schema_version": "1.0", "sections": [{"length_feet": 10}]}
    data.update(overrides)
    return data


class TestQuoteConfigurationSchema:
    """Tests for the Pydantic schema models."""

    def test_defaults(self) -> None:
        config = QuoteConfiguration.model_validate(_config())
        assert config.railing.style == RailStyle.VICTORIAN
        assert config.railing.infill == InfillType.PICKETS
        assert config.railing.railing_end == RailingEndType.NONE
        assert config.sections[0].type == SectionType.FLAT
        assert config.output.project_name == "railing"
        assert config.output.diagram.show_ground_line is True

    def test_wire_names_for_enums(self) -> None:
        config = QuoteConfiguration.model_validate(
            _config(railing={"infill": "twistedPickets", "railing_end": "foldDown"})
        )
        assert config.railing.infill == InfillType.TWISTED_PICKETS
        assert config.railing.railing_end == RailingEndType.FOLD_DOWN

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_config(colour="black"))

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            SectionConfigSchema(length_feet=-1.0)

    def test_infinite_length_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            SectionConfigSchema(length_feet=float("inf"))

    def test_sections_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate({"schema_version": "1.0", "sections": []})

    @pytest.mark.parametrize("version", ["1.0", "1.3"])
    def test_supported_versions(self, version: str) -> None:
        assert QuoteConfiguration.model_validate(_config(schema_version=version))

    @pytest.mark.parametrize("version", ["2.0", "1", "v1.0"])
    def test_unsupported_versions(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_config(schema_version=version))

    def test_duplicate_section_ids_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Duplicate section ids"):
            QuoteConfiguration.model_validate(
                _config(sections=[{"id": "a", "length_feet": 4}, {"id": "a", "length_feet": 5}])
            )

    def test_invalid_output_format_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_config(output={"formats": ["pdf"]}))


class TestLoadConfig:
    """Tests for load_config and load_config_from_dict."""

    def test_load_valid_file(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_cable.json")
        assert config.railing.infill == InfillType.CABLE
        assert [s.id for s in config.sections] == ["left", "stairs"]
        assert config.customer is not None
        assert config.output.diagram.embed_in_json is True

    def test_accepts_string_path(self) -> None:
        config = load_config(str(FIXTURES_PATH / "valid_minimal.json"))
        assert len(config.sections) == 1

    def test_file_not_found(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "nonexistent.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_json_parse_error_has_position(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] >= 1

    def test_validation_error_paths(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_schema.json")
        error = exc_info.value
        assert error.error_type == "validation"
        paths = {detail["path"] for detail in error.details}
        assert "railing.style" in paths
        assert "sections[0].length_feet" in paths
        assert "colour" in paths
        assert "Configuration validation failed" in str(error)

    def test_from_dict(self) -> None:
        config = load_config_from_dict(_config(railing={"style": "rectangle"}))
        assert config.railing.style == RailStyle.RECTANGLE

    def test_from_dict_error_has_no_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"sections": [{"length_feet": 1}]})
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "schema_version"


class TestValidateConfig:
    """Tests for validate_config."""

    def test_clean_configuration(self) -> None:
        result = validate_config(load_config_from_dict(_config()))
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_unavailable_infill_and_end(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "invalid_combination.json"))
        assert result.exit_code == 1
        paths = [e.path for e in result.errors]
        assert paths == ["railing.infill", "railing.railing_end"]

    def test_picket_style_on_victorian(self) -> None:
        config = load_config_from_dict(_config(railing={"picket_style": "round"}))
        result = validate_config(config)
        assert [e.path for e in result.errors] == ["railing.picket_style"]

    def test_ignored_picket_style_warns(self) -> None:
        config = load_config_from_dict(
            _config(railing={"style": "rectangle", "infill": "cable", "picket_style": "straight"})
        )
        result = validate_config(config)
        assert result.is_valid
        assert [w.path for w in result.warnings] == ["railing.picket_style"]

    def test_zero_length_section_warns(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "valid_with_warnings.json"))
        assert result.exit_code == 2
        assert result.warnings[0].path == "sections[1].length_feet"

    def test_all_zero_run_warns(self) -> None:
        result = validate_config(load_config_from_dict(_config(sections=[{"length_feet": 0}])))
        assert any(w.path == "sections" for w in result.warnings)

    def test_long_section_and_run_warn(self) -> None:
        sections = [{"length_feet": 70}, {"length_feet": 70}, {"length_feet": 70}]
        result = validate_config(load_config_from_dict(_config(sections=sections)))
        assert result.is_valid
        paths = [w.path for w in result.warnings]
        assert paths.count("sections") == 1
        assert "sections[0].length_feet" in paths

    def test_run_over_maximum_is_error(self) -> None:
        sections = [{"length_feet": 600}, {"length_feet": 600}]
        result = validate_config(load_config_from_dict(_config(sections=sections)))
        assert not result.is_valid
        assert result.errors[0].path == "sections"

    def test_no_infill_warns(self) -> None:
        result = validate_config(load_config_from_dict(_config(railing={"infill": "none"})))
        assert result.is_valid
        assert [w.path for w in result.warnings] == ["railing.infill"]

    def test_to_dict(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "invalid_combination.json"))
        data = result.to_dict()
        assert data["is_valid"] is False
        assert data["errors"][0]["value"] == "cable"


class TestConfigToRequest:
    """Tests for config_to_request."""

    def test_sections_get_positional_ids(self) -> None:
        config = load_config_from_dict(
            _config(sections=[{"length_feet": 4}, {"id": "stairs", "length_feet": 6, "type": "angled"}])
        )
        request = config_to_request(config)
        assert [s.id for s in request.sections] == ["1", "stairs"]
        assert request.sections[1].type == SectionType.ANGLED

    def test_railing_options_and_customer(self) -> None:
        request = config_to_request(load_config(FIXTURES_PATH / "valid_cable.json"))
        assert request.style == RailStyle.RECTANGLE
        assert request.infill == InfillType.CABLE
        assert request.railing_end == RailingEndType.FOLD_BACK
        assert request.picket_style is None
        assert request.customer is not None
        assert request.customer.zipcode == "12345"
        assert request.validate(require_contact=True) == []

    def test_picket_style_carried(self) -> None:
        config = load_config_from_dict(
            _config(railing={"style": "rectangle", "picket_style": "square"})
        )
        assert config_to_request(config).picket_style == PicketStyle.SQUARE
