"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from railquote.infrastructure.exporters import ExporterRegistry
from railquote.web.dependencies import GenerateCommandDep
from railquote.web.exceptions import ExportError, UnsupportedFormatError
from railquote.web.routers.quote import generate_quote, schema_to_request
from railquote.web.schemas.requests import QuoteRequestSchema
from railquote.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/quote/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={
        400: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
async def export_quote(
    format_name: str,
    request: QuoteRequestSchema,
    command: GenerateCommandDep,
    embed_diagram: bool = False,
) -> Response:
    """Export a railing quote to any registered format.

    Args:
        format_name: Export format name (json, svg, dxf, text).
        request: Railing options and sections.
        command: Injected GenerateQuoteCommand.
        embed_diagram: Embed the SVG diagram in JSON exports.

    Returns:
        Exported content as a download with the exporter's media type.

    Raises:
        UnsupportedFormatError: If format is not registered.
        ExportError: If the exporter cannot produce the document.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = generate_quote(command, schema_to_request(request))

    exporter_class = ExporterRegistry.get(format_name)
    exporter = (
        exporter_class(embed_diagram=embed_diagram)
        if format_name == "json"
        else exporter_class()
    )
    try:
        content = exporter.export_string(output)
    except ValueError as e:
        raise ExportError(str(e), format_name) from e

    filename = f"railing.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
