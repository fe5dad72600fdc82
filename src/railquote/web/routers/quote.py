"""Quote generation endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from railquote.application.commands import GenerateQuoteCommand
from railquote.application.config import (
    ConfigError,
    config_to_request,
    load_config_from_dict,
)
from railquote.application.dtos import CustomerContact, QuoteOutput, QuoteRequest
from railquote.domain.value_objects import SectionConfig
from railquote.infrastructure.diagram_renderer import DiagramRenderer
from railquote.web.dependencies import DiagramRendererDep, GenerateCommandDep
from railquote.web.exceptions import QuoteGenerationError
from railquote.web.schemas.requests import QuoteFromConfigRequest, QuoteRequestSchema
from railquote.web.schemas.responses import (
    ErrorResponseSchema,
    MaterialsSchema,
    PriceSchema,
    QuoteResponseSchema,
)

router = APIRouter(prefix="/quote", tags=["quote"])


def schema_to_request(request: QuoteRequestSchema) -> QuoteRequest:
    """Convert an API request body to the application QuoteRequest."""
    customer = None
    if request.customer is not None:
        customer = CustomerContact(
            name=request.customer.name,
            contact=request.customer.contact,
            zipcode=request.customer.zipcode,
        )
    return QuoteRequest(
        style=request.style,
        infill=request.infill,
        sections=[
            SectionConfig(
                id=section.id if section.id is not None else str(index + 1),
                length_feet=section.length_feet,
                type=section.type,
            )
            for index, section in enumerate(request.sections)
        ],
        picket_style=request.picket_style,
        railing_end=request.railing_end,
        customer=customer,
    )


def generate_quote(
    command: GenerateQuoteCommand, request: QuoteRequest, include_diagram: bool = True
) -> QuoteOutput:
    """Run the quote command, raising QuoteGenerationError on failure."""
    output = command.execute(request, include_diagram=include_diagram)
    if not output.is_valid:
        raise QuoteGenerationError(output.errors)
    return output


def _quote_output_to_schema(
    output: QuoteOutput, renderer: DiagramRenderer | None = None
) -> QuoteResponseSchema:
    """Convert QuoteOutput to response schema."""
    assert output.materials is not None and output.price is not None

    positions: list[float] = []
    diagram_svg = None
    if output.diagram is not None:
        positions = list(output.diagram.stanchion_positions_feet)
        if renderer is not None:
            diagram_svg = renderer.render_svg(output.diagram, output.request.style)

    return QuoteResponseSchema(
        is_valid=output.is_valid,
        errors=output.errors,
        materials=MaterialsSchema(**asdict(output.materials)),
        price=PriceSchema(**asdict(output.price)),
        stanchion_positions_feet=positions,
        diagram_svg=diagram_svg,
    )


@router.post(
    "",
    response_model=QuoteResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def create_quote(
    request: QuoteRequestSchema,
    command: GenerateCommandDep,
    renderer: DiagramRendererDep,
) -> QuoteResponseSchema:
    """Quote a railing from its options and sections.

    Args:
        request: Railing options and sections.
        command: Injected GenerateQuoteCommand.
        renderer: Injected DiagramRenderer.

    Returns:
        Materials, price, stanchion positions and optionally the diagram.

    Raises:
        QuoteGenerationError: If the railing options are invalid.
    """
    output = generate_quote(command, schema_to_request(request), request.include_diagram)
    return _quote_output_to_schema(output, renderer if request.include_diagram else None)


@router.post("/from-config", response_model=QuoteResponseSchema)
async def create_quote_from_config(
    request: QuoteFromConfigRequest,
    command: GenerateCommandDep,
    renderer: DiagramRendererDep,
) -> QuoteResponseSchema:
    """Quote a railing from a full JSON configuration.

    Accepts the same document as the ``railquote quote --config`` file.

    Raises:
        HTTPException: If the configuration fails schema validation.
        QuoteGenerationError: If the railing options are invalid.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": e.message, "error_type": e.error_type, "details": e.details},
        ) from e

    output = generate_quote(command, config_to_request(config))
    return _quote_output_to_schema(output, renderer)


@router.post("/diagram")
async def render_diagram(
    request: QuoteRequestSchema,
    command: GenerateCommandDep,
    renderer: DiagramRendererDep,
) -> Response:
    """Render the side-view diagram of a railing.

    Returns:
        SVG document.
    """
    output = generate_quote(command, schema_to_request(request))
    assert output.diagram is not None
    return Response(
        content=renderer.render_svg(output.diagram, output.request.style),
        media_type="image/svg+xml",
    )
