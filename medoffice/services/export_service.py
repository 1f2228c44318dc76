"""Export service - CSV and PDF downloads of a calendar window."""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

import logfire

from medoffice.calendar.export import (
    csv_filename,
    pdf_filename,
    render_pdf,
    to_csv,
    to_printable_document,
)
from medoffice.calendar.window import ViewWindow, select_sorted
from medoffice.errors import ExportFailure, normalize_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportArtifact:
    """A finished download: never built from partial output."""

    filename: str
    content: bytes
    media_type: str
    count: int


class ExportService:
    """Builds export artifacts and turns any serialization error into ExportFailure.

    Window errors (unknown view, malformed date) are raised as they are; they
    come from the caller, not from the export step.
    """

    def __init__(self, font_path: str | None = None):
        self.font_path = font_path or None

    def export_csv(self, appointments: Iterable, reference_date, granularity) -> ExportArtifact:
        window = ViewWindow.of(reference_date, granularity)
        members = select_sorted(appointments, window.reference_date, window.granularity)

        try:
            text = to_csv(members, presorted=True)
            rows = list(csv.reader(io.StringIO(text)))
            if len(rows) != len(members) + 1:
                raise ExportFailure(
                    f"CSV has {len(rows) - 1} data rows, expected {len(members)}"
                )
            content = text.encode("utf-8")
        except Exception as e:
            failure = normalize_error(e, export=True)
            logfire.error("export_failed", format="csv", error=failure.message)
            raise failure from e

        logfire.info(
            "calendar_export",
            format="csv",
            view=window.granularity.value,
            date=window.reference_date.isoformat(),
            count=len(members),
        )
        return ExportArtifact(
            filename=csv_filename(window.granularity, window.reference_date),
            content=content,
            media_type="text/csv; charset=utf-8",
            count=len(members),
        )

    def export_pdf(
        self,
        appointments: Iterable,
        reference_date,
        granularity,
        *,
        generated_at: datetime | None = None,
    ) -> ExportArtifact:
        window = ViewWindow.of(reference_date, granularity)
        members = select_sorted(appointments, window.reference_date, window.granularity)
        generated_at = generated_at or datetime.now()

        try:
            document = to_printable_document(
                members,
                window.reference_date,
                window.granularity,
                generated_at=generated_at,
            )
            if len(document.entries) != len(members):
                raise ExportFailure(
                    f"Document has {len(document.entries)} entries, expected {len(members)}"
                )
            content = render_pdf(document, font_path=self.font_path)
            if not content.startswith(b"%PDF"):
                raise ExportFailure("PDF engine returned incomplete output")
        except Exception as e:
            failure = normalize_error(e, export=True)
            logfire.error("export_failed", format="pdf", error=failure.message)
            raise failure from e

        logger.info(f"Rendered {document.page_count} page(s) for {window.label}")
        logfire.info(
            "calendar_export",
            format="pdf",
            view=window.granularity.value,
            date=window.reference_date.isoformat(),
            count=len(members),
            pages=document.page_count,
        )
        return ExportArtifact(
            filename=pdf_filename(window.granularity, window.reference_date),
            content=content,
            media_type="application/pdf",
            count=len(members),
        )
