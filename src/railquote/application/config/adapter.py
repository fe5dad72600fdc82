"""Adapter to convert QuoteConfiguration to the QuoteRequest DTO.

The configuration schema is nested and uses optional section ids; the
command works on a flat request with domain value objects.
"""

from __future__ import annotations

from railquote.application.config.schema import QuoteConfiguration, SectionConfigSchema
from railquote.application.dtos import CustomerContact, QuoteRequest
from railquote.domain.value_objects import SectionConfig


def config_to_sections(sections: list[SectionConfigSchema]) -> list[SectionConfig]:
    """Convert configured sections to domain sections.

    Sections without an id get their 1-based position as id.
    """
    return [
        SectionConfig(
            id=section.id if section.id is not None else str(index + 1),
            length_feet=section.length_feet,
            type=section.type,
        )
        for index, section in enumerate(sections)
    ]


def config_to_request(config: QuoteConfiguration) -> QuoteRequest:
    """Convert a QuoteConfiguration to a QuoteRequest.

    Args:
        config: A validated QuoteConfiguration instance

    Returns:
        A QuoteRequest ready for GenerateQuoteCommand

    Example:
        >>> config = load_config(Path("my-deck.json"))
        >>> result = GenerateQuoteCommand().execute(config_to_request(config))
    """
    customer = None
    if config.customer is not None:
        customer = CustomerContact(
            name=config.customer.name,
            contact=config.customer.contact,
            zipcode=config.customer.zipcode,
        )

    return QuoteRequest(
        style=config.railing.style,
        infill=config.railing.infill,
        sections=config_to_sections(config.sections),
        picket_style=config.railing.picket_style,
        railing_end=config.railing.railing_end,
        customer=customer,
    )
