"""ReportLab PDF encoder adapter.

Lays out a trip summary table followed by the itinerary text. Lines of
the itinerary that start with ``#`` become headings, blank lines become
vertical space, everything else is a paragraph.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4, letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...config import ExportConfig, get_config
from ...domain.errors import ExportError
from ...domain.models import TripPreferences

PAGE_SIZES = {"A4": A4, "letter": letter}


def summary_rows(preferences: TripPreferences) -> List[List[str]]:
    """Trip metadata as label/value rows."""
    return [
        ["Destinations", preferences.destination_label or "-"],
        ["Dates", f"{preferences.start_date or '-'} to {preferences.end_date or '-'}"],
        ["Budget", f"{preferences.budget or '-'} {preferences.currency.value}"],
        [
            "Travel style",
            preferences.travel_style.value if preferences.travel_style else "-",
        ],
        ["Interests", ", ".join(preferences.sorted_interests) or "-"],
        [
            "Mode of travel",
            preferences.mode_of_travel.value if preferences.mode_of_travel else "-",
        ],
    ]


@dataclass
class ReportLabPdfEncoder:
    """PDF encoder writing into the configured export directory.

    This adapter implements ExportEncoderPort. Layout runs in a worker
    thread so the event loop stays responsive.

    Attributes:
        config: Export configuration
    """

    config: ExportConfig = field(default_factory=lambda: get_config().export)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def output_path(self, filename: str) -> Path:
        # Only the final component is used so a name cannot escape output_dir
        return self.config.output_dir / Path(filename).name

    async def encode(
        self,
        itinerary_text: str,
        metadata: TripPreferences,
        filename: str,
    ) -> bool:
        """Write the itinerary PDF.

        Returns:
            True once the document has been written.

        Raises:
            ExportError: If the document could not be built.
        """
        path = self.output_path(filename)
        try:
            await asyncio.to_thread(self._write, itinerary_text, metadata, path)
        except Exception as e:
            raise ExportError(f"PDF generation failed: {e}", cause=e, filename=filename)

        self._logger.info("PDF written", extra={"path": str(path)})
        return True

    def _write(self, itinerary_text: str, metadata: TripPreferences, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(path),
            pagesize=PAGE_SIZES[self.config.page_size],
            title=self.config.title,
            subject=metadata.destination_label,
        )
        doc.build(self._story(itinerary_text, metadata))

    def _story(self, itinerary_text: str, metadata: TripPreferences) -> List[Any]:
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            "ItineraryTitle",
            parent=styles["Heading1"],
            fontSize=22,
            textColor=colors.HexColor("#c2410c"),
            spaceAfter=18,
            alignment=TA_CENTER,
        )
        heading_style = ParagraphStyle(
            "ItineraryHeading",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor("#c2410c"),
            spaceBefore=12,
            spaceAfter=8,
        )
        table_style = TableStyle(
            [
                ("BACKGROUND", (0, 0), (0, -1), colors.HexColor("#f0f0f0")),
                ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
                ("ALIGN", (0, 0), (-1, -1), "LEFT"),
                ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
                ("GRID", (0, 0), (-1, -1), 1, colors.grey),
            ]
        )

        story: List[Any] = [
            Paragraph(escape(self.config.title), title_style),
            Paragraph("Trip Summary", heading_style),
        ]
        summary = Table(
            [[label, Paragraph(escape(value), styles["BodyText"])]
             for label, value in summary_rows(metadata)],
            colWidths=[1.8 * inch, 4.2 * inch],
        )
        summary.setStyle(table_style)
        story.append(summary)
        story.append(Spacer(1, 0.3 * inch))

        for line in itinerary_text.splitlines():
            stripped = line.strip()
            if not stripped:
                story.append(Spacer(1, 0.12 * inch))
            elif stripped.startswith("#"):
                story.append(Paragraph(escape(stripped.lstrip("#").strip()), heading_style))
            else:
                story.append(Paragraph(escape(stripped), styles["BodyText"]))

        return story
