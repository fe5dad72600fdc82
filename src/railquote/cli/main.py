"""Typer CLI for railing quotes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from railquote.application import GenerateQuoteCommand, QuoteOutput, QuoteRequest
from railquote.application.config import (
    ConfigError,
    QuoteConfiguration,
    config_to_request,
    load_config,
)
from railquote.cli.commands import display_load_error, validate_command
from railquote.domain.constants import GEOMETRY, rail_rate
from railquote.domain.validity import (
    allowed_infills,
    allowed_picket_styles,
    allowed_railing_ends,
)
from railquote.domain.value_objects import (
    InfillType,
    PicketStyle,
    RailingEndType,
    RailStyle,
    SectionConfig,
    SectionType,
)
from railquote.infrastructure.exporters import ExporterRegistry, ExportManager

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="railquote",
    help="Quote deck and stair railings: materials, price and side-view diagram.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Quote deck and stair railings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_section(value: str, index: int) -> SectionConfig:
    """Parse a ``LENGTH[:TYPE]`` section option such as ``10`` or ``8:angled``.

    Raises:
        typer.BadParameter: If the length or type cannot be parsed.
    """
    length_text, _, type_text = value.partition(":")
    try:
        length = float(length_text)
    except ValueError:
        raise typer.BadParameter(f"Invalid section length: {length_text!r}")
    try:
        section_type = SectionType(type_text.strip().lower() or SectionType.FLAT.value)
    except ValueError:
        valid = ", ".join(t.value for t in SectionType)
        raise typer.BadParameter(f"Invalid section type: {type_text!r} (choose from: {valid})")
    return SectionConfig(id=str(index + 1), length_feet=length, type=section_type)


def _build_request(
    config_file: Path | None,
    style: RailStyle | None,
    infill: InfillType | None,
    picket_style: PicketStyle | None,
    railing_end: RailingEndType | None,
    sections: list[str] | None,
) -> tuple[QuoteRequest, QuoteConfiguration | None]:
    """Build a quote request from a config file and/or CLI options.

    CLI options override the values of the configuration file.
    """
    config = None
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
        request = config_to_request(config)
    else:
        if not sections:
            typer.echo(
                "Error: at least one --section is required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)
        request = QuoteRequest(
            style=RailStyle.VICTORIAN,
            infill=InfillType.PICKETS,
            sections=[],
        )

    if sections:
        request.sections = [parse_section(value, i) for i, value in enumerate(sections)]
    if style is not None:
        request.style = style
    if infill is not None:
        request.infill = infill
    if picket_style is not None:
        request.picket_style = picket_style
    if railing_end is not None:
        request.railing_end = railing_end
    logger.debug(
        f"Built request: {request.style.value}/{request.infill.value}, "
        f"{len(request.sections)} sections"
    )
    return request, config


def _run_quote(request: QuoteRequest) -> QuoteOutput:
    result = GenerateQuoteCommand().execute(request)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    return result


def _exporter_options(config: QuoteConfiguration | None, embed_diagram: bool) -> dict[str, dict]:
    show_ground_line = True
    if config is not None:
        show_ground_line = config.output.diagram.show_ground_line
        embed_diagram = embed_diagram or config.output.diagram.embed_in_json
    return {
        "svg": {"show_ground_line": show_ground_line},
        "json": {"embed_diagram": embed_diagram},
    }


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
StyleOption = Annotated[
    RailStyle | None,
    typer.Option("--style", "-s", help="Top rail style"),
]
InfillOption = Annotated[
    InfillType | None,
    typer.Option("--infill", "-i", help="Infill between stanchions"),
]
PicketStyleOption = Annotated[
    PicketStyle | None,
    typer.Option("--picket-style", help="Picket style (rectangle rails with pickets)"),
]
RailingEndOption = Annotated[
    RailingEndType | None,
    typer.Option("--railing-end", help="End treatment at both ends of the run"),
]
SectionOption = Annotated[
    list[str] | None,
    typer.Option(
        "--section",
        help="Section as LENGTH[:TYPE] in feet, e.g. 10 or 8:angled (repeatable)",
    ),
]


@app.command()
def quote(
    config_file: ConfigOption = None,
    style: StyleOption = None,
    infill: InfillOption = None,
    picket_style: PicketStyleOption = None,
    railing_end: RailingEndOption = None,
    sections: SectionOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, svg, dxf"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to this file"),
    ] = None,
    embed_diagram: Annotated[
        bool,
        typer.Option("--embed-diagram", help="Include the SVG diagram in JSON output"),
    ] = False,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: text,json,svg,dxf (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Generate a railing quote.

    Provide the railing via CLI options or a JSON configuration file. When
    using --config, CLI options override config file values.

    Examples:
        railquote quote --section 10
        railquote quote --style rectangle --infill cable --section 8 --section 8
        railquote quote --config deck.json --format json --embed-diagram
        railquote quote --config deck.json --output-formats all --output-dir ./out
    """
    request, config = _build_request(
        config_file, style, infill, picket_style, railing_end, sections
    )
    result = _run_quote(request)

    exporter_options = _exporter_options(config, embed_diagram)
    if project_name is None:
        project_name = config.output.project_name if config else "railing"

    formats: list[str] = []
    if output_formats is not None:
        if output_formats.lower() == "all":
            formats = ExporterRegistry.available_formats()
        else:
            formats = [f.strip().lower() for f in output_formats.split(",") if f.strip()]
    elif config is not None and config.output.formats:
        formats = config.output.formats
        if "all" in formats:
            formats = ExporterRegistry.available_formats()

    if formats:
        available = ExporterRegistry.available_formats()
        invalid = [f for f in formats if f not in available]
        if invalid:
            typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
            typer.echo(f"Available formats: {', '.join(available)}", err=True)
            raise typer.Exit(code=1)

        if output_dir is None and config is not None and config.output.output_dir:
            output_dir = Path(config.output.output_dir)
        manager = ExportManager(output_dir or Path("."), exporter_options=exporter_options)
        try:
            files = manager.export_all(formats, result, project_name)
        except (OSError, ValueError) as e:
            typer.echo(f"Export error: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo("Exported files:")
        for fmt, path in files.items():
            typer.echo(f"  {fmt.upper()}: {path}")
        return

    if not ExporterRegistry.is_registered(output_format):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(ExporterRegistry.available_formats())}", err=True)
        raise typer.Exit(code=1)

    exporter = ExporterRegistry.get(output_format)(**exporter_options.get(output_format, {}))
    if output_file is not None:
        exporter.export(result, output_file)
        typer.echo(f"Wrote {output_format} output to {output_file}")
    else:
        typer.echo(exporter.export_string(result))


@app.command()
def diagram(
    config_file: ConfigOption = None,
    style: StyleOption = None,
    infill: InfillOption = None,
    picket_style: PicketStyleOption = None,
    railing_end: RailingEndOption = None,
    sections: SectionOption = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SVG file to write (default: stdout)"),
    ] = None,
) -> None:
    """Render the side-view diagram of a railing as SVG."""
    request, config = _build_request(
        config_file, style, infill, picket_style, railing_end, sections
    )
    result = _run_quote(request)

    exporter = ExporterRegistry.get("svg")(**_exporter_options(config, False)["svg"])
    if output_file is not None:
        exporter.export(result, output_file)
        typer.echo(f"Wrote diagram to {output_file}")
    else:
        typer.echo(exporter.export_string(result))


@app.command()
def options() -> None:
    """Show which infills, picket styles and railing ends each rail style offers."""
    for rail_style in RailStyle:
        typer.echo(f"{rail_style.value} (top rail ${rail_rate(rail_style):.2f}/ft)")
        typer.echo(f"  Infill:        {', '.join(i.value for i in allowed_infills(rail_style))}")
        picket_styles = allowed_picket_styles(rail_style, InfillType.PICKETS)
        typer.echo(
            f"  Picket styles: {', '.join(p.value for p in picket_styles) or '-'}"
        )
        typer.echo(
            f"  Railing ends:  {', '.join(e.value for e in allowed_railing_ends(rail_style))}"
        )
    typer.echo()
    typer.echo(
        f"Stanchions every {GEOMETRY.max_stanchion_spacing_feet:g} ft at most "
        f"({GEOMETRY.max_stanchion_spacing_cable_feet:g} ft for cable)."
    )


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 8000,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Serve the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("railquote.web.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
