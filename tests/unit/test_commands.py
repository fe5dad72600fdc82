"""Unit tests for the quote request DTOs, command and service factory."""

from __future__ import annotations

import math

import pytest

from railquote.application.commands import GenerateQuoteCommand
from railquote.application.dtos import MAX_RUN_FEET, CustomerContact, QuoteRequest
from railquote.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from railquote.domain.services import QuoteEngine
from railquote.domain.value_objects import (
    InfillType,
    PicketStyle,
    RailingEndType,
    RailStyle,
    SectionConfig,
)


def _request(sections: list[SectionConfig], **kwargs) -> QuoteRequest:
    kwargs.setdefault("style", RailStyle.VICTORIAN)
    kwargs.setdefault("infill", InfillType.PICKETS)
    return QuoteRequest(sections=sections, **kwargs)


class TestQuoteRequestValidate:
    """Tests for QuoteRequest.validate."""

    def test_valid_request(self, flat_ten: list[SectionConfig]) -> None:
        assert _request(flat_ten).validate() == []

    def test_no_sections(self) -> None:
        assert "At least one section is required" in _request([]).validate()

    def test_negative_and_non_finite_lengths(self) -> None:
        sections = [
            SectionConfig(id="a", length_feet=-1.0),
            SectionConfig(id="b", length_feet=math.nan),
        ]
        errors = _request(sections).validate()
        assert "Section 1 length cannot be negative" in errors
        assert "Section 2 length must be a finite number" in errors

    def test_duplicate_ids(self) -> None:
        sections = [
            SectionConfig(id="a", length_feet=4.0),
            SectionConfig(id="a", length_feet=5.0),
        ]
        assert "Duplicate section id: 'a'" in _request(sections).validate()

    def test_run_over_maximum(self) -> None:
        sections = [SectionConfig(id="a", length_feet=MAX_RUN_FEET + 1)]
        errors = _request(sections).validate()
        assert any("exceeds maximum" in e for e in errors)

    def test_invalid_combination(self, flat_ten: list[SectionConfig]) -> None:
        errors = _request(flat_ten, infill=InfillType.SLATS).validate()
        assert len(errors) == 1
        assert "slats" in errors[0]

    def test_contact_required_only_on_request(self, flat_ten: list[SectionConfig]) -> None:
        request = _request(flat_ten)
        assert request.validate() == []
        assert request.validate(require_contact=True) == [
            "Customer contact details are required"
        ]

    def test_incomplete_contact(self, flat_ten: list[SectionConfig]) -> None:
        request = _request(flat_ten, customer=CustomerContact(name=" ", zipcode="12345"))
        errors = request.validate(require_contact=True)
        assert errors == [
            "Customer name is required",
            "Customer contact (email or phone) is required",
        ]


class TestGenerateQuoteCommand:
    """Tests for GenerateQuoteCommand."""

    def test_successful_quote(
        self, generate_command: GenerateQuoteCommand, flat_ten: list[SectionConfig]
    ) -> None:
        output = generate_command.execute(_request(flat_ten))
        assert output.is_valid
        assert output.materials is not None
        assert output.materials.picket_count == 26
        assert output.price is not None
        assert output.price.total == pytest.approx(1821.25)
        assert output.diagram is not None
        assert len(output.diagram.pickets) == 26

    def test_diagram_can_be_skipped(
        self, generate_command: GenerateQuoteCommand, flat_ten: list[SectionConfig]
    ) -> None:
        output = generate_command.execute(_request(flat_ten), include_diagram=False)
        assert output.is_valid
        assert output.diagram is None

    def test_invalid_request_returns_errors(
        self, generate_command: GenerateQuoteCommand, flat_ten: list[SectionConfig]
    ) -> None:
        output = generate_command.execute(
            _request(flat_ten, picket_style=PicketStyle.ROUND)
        )
        assert not output.is_valid
        assert output.materials is None
        assert output.price is None

    def test_rectangle_fold_back(
        self, generate_command: GenerateQuoteCommand, flat_ten: list[SectionConfig]
    ) -> None:
        output = generate_command.execute(
            _request(
                flat_ten,
                style=RailStyle.RECTANGLE,
                railing_end=RailingEndType.FOLD_BACK,
            )
        )
        assert output.is_valid
        assert output.diagram is not None
        assert len(output.diagram.railing_ends) == 2

    def test_engine_errors_become_output_errors(
        self, flat_ten: list[SectionConfig]
    ) -> None:
        class FailingEngine(QuoteEngine):
            def quote(self, *args, **kwargs):
                from railquote.domain.exceptions import InvalidConfigurationError

                raise InvalidConfigurationError("spacing broke")

        output = GenerateQuoteCommand(quote_engine=FailingEngine()).execute(
            _request(flat_ten)
        )
        assert output.errors == ["spacing broke"]


class TestServiceFactory:
    """Tests for ServiceFactory and the default factory helpers."""

    def teardown_method(self) -> None:
        reset_factory()

    def test_services_are_cached(self) -> None:
        factory = ServiceFactory()
        assert factory.get_quote_engine() is factory.get_quote_engine()
        assert factory.get_diagram_renderer() is factory.get_diagram_renderer()
        assert factory.get_summary_formatter() is factory.get_summary_formatter()

    def test_command_uses_factory_engine(self) -> None:
        factory = ServiceFactory()
        command = factory.create_generate_command()
        assert command.quote_engine is factory.get_quote_engine()

    def test_default_factory_can_be_replaced(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom
