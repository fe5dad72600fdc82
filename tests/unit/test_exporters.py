"""Tests for the exporter framework and the registered exporters."""

from __future__ import annotations

import base64
import json
from io import StringIO
from pathlib import Path
from typing import ClassVar

import ezdxf
import pytest

from railquote.application.commands import GenerateQuoteCommand
from railquote.application.dtos import CustomerContact, QuoteOutput, QuoteRequest
from railquote.domain.value_objects import (
    InfillType,
    RailingEndType,
    RailStyle,
    SectionConfig,
)
from railquote.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    ExportManager,
    QuoteJsonExporter,
    SvgExporter,
    TextExporter,
)


@pytest.fixture
def victorian_output(flat_ten: list[SectionConfig]) -> QuoteOutput:
    request = QuoteRequest(
        style=RailStyle.VICTORIAN,
        infill=InfillType.PICKETS,
        sections=flat_ten,
        railing_end=RailingEndType.FOLD_DOWN,
        customer=CustomerContact(name="Jane Doe", contact="jane@example.com", zipcode="12345"),
    )
    return GenerateQuoteCommand().execute(request)


@pytest.fixture
def slat_output(flat_ten: list[SectionConfig]) -> QuoteOutput:
    request = QuoteRequest(
        style=RailStyle.RECTANGLE, infill=InfillType.SLATS, sections=flat_ten
    )
    return GenerateQuoteCommand().execute(request)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_formats_registered(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "json", "svg", "text"]
        assert ExporterRegistry.get("dxf") is DxfExporter
        assert ExporterRegistry.get("json") is QuoteJsonExporter

    def test_get_unknown_format_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("pdf")
        assert "No exporter registered for format 'pdf'" in str(exc_info.value)

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("csv")
        class CsvExporter:
            format_name: ClassVar[str] = "csv"
            file_extension: ClassVar[str] = "csv"
            media_type: ClassVar[str] = "text/csv"

            def export(self, output, path: Path) -> None:
                pass

            def export_string(self, output) -> str:
                return ""

        assert ExporterRegistry.is_registered("csv")
        assert ExporterRegistry.get("csv") is CsvExporter

    def test_clear_removes_all_exporters(self) -> None:
        ExporterRegistry.clear()
        assert ExporterRegistry.available_formats() == []


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all_writes_one_file_per_format(
        self, tmp_path: Path, victorian_output: QuoteOutput
    ) -> None:
        manager = ExportManager(tmp_path / "out")
        files = manager.export_all(["json", "svg", "text"], victorian_output, "deck")

        assert files == {
            "json": tmp_path / "out" / "deck.json",
            "svg": tmp_path / "out" / "deck.svg",
            "text": tmp_path / "out" / "deck.txt",
        }
        assert all(path.exists() for path in files.values())

    def test_exporter_options_passed_to_constructor(
        self, tmp_path: Path, victorian_output: QuoteOutput
    ) -> None:
        manager = ExportManager(tmp_path, exporter_options={"json": {"embed_diagram": True}})
        path = manager.export_single("json", victorian_output)
        assert path == tmp_path / "railing.json"
        assert "diagramImage" in json.loads(path.read_text())

    def test_unknown_format_raises(self, tmp_path: Path, victorian_output: QuoteOutput) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["pdf"], victorian_output)


class TestQuoteJsonExporter:
    """Tests for the JSON quote payload."""

    def test_payload_keys(self, victorian_output: QuoteOutput) -> None:
        data = json.loads(QuoteJsonExporter().export_string(victorian_output))

        assert data["name"] == "Jane Doe"
        assert data["contact"] == "jane@example.com"
        assert data["zipcode"] == "12345"
        assert data["style"] == "victorian"
        assert data["infill"] == "pickets"
        assert data["picketStyle"] is None
        assert data["railingEnd"] == "foldDown"
        assert data["materials"] == {
            "topRailFeet": 10.0,
            "stanchionCount": 3,
            "picketCount": 26,
            "cableFeet": 0.0,
            "slatFeet": 0.0,
        }
        assert data["price"]["total"] == pytest.approx(victorian_output.price.total)
        assert data["sections"] == [{"id": "s1", "lengthFeet": 10.0, "type": "flat"}]
        assert data["stanchionPositionsFeet"] == [0.0, 5.0, 10.0]
        assert "diagramImage" not in data

    def test_embedded_diagram_is_svg_data_url(self, victorian_output: QuoteOutput) -> None:
        data = json.loads(
            QuoteJsonExporter(embed_diagram=True).export_string(victorian_output)
        )
        prefix = "data:image/svg+xml;base64,"
        assert data["diagramImage"].startswith(prefix)
        svg = base64.b64decode(data["diagramImage"][len(prefix):]).decode("utf-8")
        assert svg.startswith("<svg")

    def test_failed_quote_exports_errors(self, flat_ten: list[SectionConfig]) -> None:
        output = GenerateQuoteCommand().execute(
            QuoteRequest(style=RailStyle.VICTORIAN, infill=InfillType.CABLE, sections=flat_ten)
        )
        data = json.loads(QuoteJsonExporter().export_string(output))
        assert list(data) == ["errors"]


class TestSvgExporter:
    """Tests for SvgExporter."""

    def test_writes_svg_file(self, tmp_path: Path, victorian_output: QuoteOutput) -> None:
        path = tmp_path / "diagram.svg"
        SvgExporter().export(victorian_output, path)
        assert path.read_text(encoding="utf-8").startswith('<svg id="railing-diagram-svg"')

    def test_requires_diagram(self, victorian_output: QuoteOutput) -> None:
        victorian_output.diagram = None
        with pytest.raises(ValueError):
            SvgExporter().export_string(victorian_output)


class TestTextExporter:
    """Tests for TextExporter."""

    def test_summary_sections(self, victorian_output: QuoteOutput) -> None:
        text = TextExporter().export_string(victorian_output)
        assert "Style: Victorian top rail" in text
        assert "Pickets: 26 pickets" in text
        assert "Railing Ends: Fold Down" in text
        assert "TOTAL" in text

    def test_infill_label_for_slats(self, slat_output: QuoteOutput) -> None:
        text = TextExporter().export_string(slat_output)
        assert "Infill: Horizontal slats" in text
        assert "Horizontal slats" in text.split("MATERIALS")[1]


class TestDxfExporter:
    """Tests for DxfExporter."""

    def test_layers_and_entities(self, victorian_output: QuoteOutput) -> None:
        doc = ezdxf.read(StringIO(DxfExporter().export_string(victorian_output)))
        for layer in ("RAIL", "STANCHIONS", "INFILL", "ENDS", "GROUND"):
            assert layer in doc.layers

        msp = doc.modelspace()
        assert len(msp.query('LINE[layer=="STANCHIONS"]')) == 3
        assert len(msp.query('LWPOLYLINE[layer=="INFILL"]')) == 26
        assert len(msp.query('LWPOLYLINE[layer=="ENDS"]')) == 2

    def test_slats_exported_as_closed_polylines(self, slat_output: QuoteOutput) -> None:
        doc = ezdxf.read(StringIO(DxfExporter().export_string(slat_output)))
        slats = doc.modelspace().query('LWPOLYLINE[layer=="INFILL"]')
        assert len(slats) == len(slat_output.diagram.slats)
        assert all(entity.closed for entity in slats)

    def test_writes_file(self, tmp_path: Path, victorian_output: QuoteOutput) -> None:
        path = tmp_path / "railing.dxf"
        DxfExporter(units="mm").export(victorian_output, path)
        assert ezdxf.readfile(path).modelspace().query("LINE")

    def test_invalid_units(self) -> None:
        with pytest.raises(ValueError):
            DxfExporter(units="feet")
