"""ReportLab-based PDF report generator for retrofit calculations.

Produces a two-page PDF: a summary page with the baseline, impact, and
investment figures, and a detail page with the per-intervention savings,
the device-category table, and the embedded Matplotlib charts.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from typing import Dict, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Image,
    KeepTogether,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from retrofit_savings.data.models import CalculationResult
from retrofit_savings.finance.investment import selected_options
from retrofit_savings.reporting.charts import ChartGenerator
from retrofit_savings.reporting.formatting import format_currency, format_number
from retrofit_savings.reporting.summary import generate_summary

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Color palette
# ---------------------------------------------------------------------------
DARK_BLUE = colors.HexColor('#1565C0')
SAVINGS_GREEN = colors.HexColor('#4CAF50')
LIGHT_GRAY = colors.HexColor('#F5F5F5')
WHITE = colors.white


def _strip_rich_tags(text: str) -> str:
    """Remove Rich console markup tags such as [green] or [/bold]."""
    return re.sub(r'\[/?[^\]]+\]', '', text)


def _table_style(header_color: colors.Color = DARK_BLUE) -> TableStyle:
    return TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), header_color),
        ('TEXTCOLOR', (0, 0), (-1, 0), WHITE),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('ALIGN', (1, 0), (-1, -1), 'RIGHT'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [WHITE, LIGHT_GRAY]),
        ('GRID', (0, 0), (-1, -1), 0.25, colors.HexColor('#BDBDBD')),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ])


class PDFReportGenerator:
    """Generates a PDF report from a :class:`CalculationResult`."""

    def __init__(self, currency: str = "Rp") -> None:
        self.currency = currency
        self._styles = getSampleStyleSheet()
        self._register_custom_styles()

    def _register_custom_styles(self) -> None:
        """Add project-specific paragraph styles to the stylesheet."""
        self._styles.add(ParagraphStyle(
            'ReportTitle',
            parent=self._styles['Title'],
            fontSize=24,
            leading=30,
            textColor=DARK_BLUE,
            spaceAfter=12,
        ))
        self._styles.add(ParagraphStyle(
            'SectionTitle',
            parent=self._styles['Heading1'],
            fontSize=16,
            leading=20,
            textColor=DARK_BLUE,
            spaceAfter=8,
            spaceBefore=6,
        ))
        self._styles.add(ParagraphStyle(
            'BodyText2',
            parent=self._styles['Normal'],
            fontSize=10,
            leading=14,
            spaceAfter=6,
        ))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, result: CalculationResult, output_path: str) -> None:
        """Generate a complete PDF report and save to *output_path*."""
        chart_paths: Dict[str, str] = {}
        tmpdir: Optional[str] = None
        try:
            tmpdir = tempfile.mkdtemp(prefix='retrofit_savings_charts_')
            try:
                chart_paths = ChartGenerator(result).save_all(tmpdir)
            except Exception:
                logger.warning(
                    "Chart generation failed; PDF will be produced without charts.",
                    exc_info=True,
                )

            doc = SimpleDocTemplate(
                output_path,
                pagesize=A4,
                topMargin=0.75 * inch,
                bottomMargin=0.75 * inch,
                leftMargin=0.75 * inch,
                rightMargin=0.75 * inch,
            )

            elements: list = []
            elements.extend(self._build_summary_page(result))
            elements.append(PageBreak())
            elements.extend(self._build_detail_page(result, chart_paths))

            doc.build(elements, onFirstPage=self._add_page_number,
                      onLaterPages=self._add_page_number)
            logger.info("PDF report written to %s", output_path)

        finally:
            if tmpdir and os.path.isdir(tmpdir):
                shutil.rmtree(tmpdir, ignore_errors=True)

    # ------------------------------------------------------------------
    # Page number footer callback
    # ------------------------------------------------------------------

    @staticmethod
    def _add_page_number(canvas, doc) -> None:
        """Draw the page number in the footer of every page."""
        canvas.saveState()
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(colors.HexColor('#999999'))
        canvas.drawCentredString(A4[0] / 2.0, 0.5 * inch, f"Page {canvas.getPageNumber()}")
        canvas.restoreState()

    # ------------------------------------------------------------------
    # Page 1: Summary
    # ------------------------------------------------------------------

    def _build_summary_page(self, result: CalculationResult) -> list:
        elements: list = []
        cur = self.currency

        elements.append(Paragraph("Retrofit Savings Report", self._styles['ReportTitle']))

        b = result.building
        elements.append(Paragraph(
            f"{format_number(b.length, 1)} x {format_number(b.width, 1)} m, "
            f"{b.floors} floors ({b.height_class}), {b.roof_type.value} roof, "
            f"{b.dominant_cooling_system.value.replace('_', ' ')}",
            self._styles['BodyText2'],
        ))
        elements.append(Spacer(1, 0.15 * inch))

        elements.append(Paragraph("Baseline", self._styles['SectionTitle']))
        baseline = [
            ["Metric", "Value"],
            ["Building area", f"{format_number(result.building_area, 2)} m2"],
            ["Roof area", f"{format_number(result.roof_area, 2)} m2"],
            ["Window area", f"{format_number(result.window_area, 2)} m2"],
            ["Annual energy", f"{format_number(result.annual_energy, 2)} MWh"],
        ]
        elements.append(self._table(baseline, [3 * inch, 3 * inch]))

        elements.append(Paragraph("Impact", self._styles['SectionTitle']))
        impact = [
            ["Metric", "Value"],
            ["Total savings", f"{format_number(result.total_savings_percent, 1)}%"],
            ["Energy savings", f"{format_number(result.energy_savings, 2)} MWh/yr"],
            ["CO2 reduction", f"{format_number(result.co2_reduction, 2)} tCO2e/yr"],
            ["Cost savings", f"{format_currency(result.cost_savings, cur)}/yr"],
            ["Investment", format_currency(result.total_investment, cur)],
            ["Payback period", f"{format_number(result.payback_period, 1)} years"],
        ]
        elements.append(self._table(impact, [3 * inch, 3 * inch], SAVINGS_GREEN))

        elements.append(Paragraph("Summary", self._styles['SectionTitle']))
        for paragraph in _strip_rich_tags(generate_summary(result, cur)).split('\n'):
            paragraph = paragraph.strip()
            if paragraph:
                elements.append(Paragraph(paragraph, self._styles['BodyText2']))

        return elements

    # ------------------------------------------------------------------
    # Page 2: Detail
    # ------------------------------------------------------------------

    def _build_detail_page(self, result: CalculationResult,
                           chart_paths: Dict[str, str]) -> list:
        elements: list = []

        elements.append(Paragraph("Charged Investments", self._styles['SectionTitle']))
        charged = selected_options(result.interventions)
        if charged:
            rows = [["Option", f"Investment ({self.currency})"]]
            for option in charged:
                rows.append([option.display_name,
                             format_number(result.investments.cost(option), 0)])
            elements.append(self._table(rows, [3.5 * inch, 2.5 * inch]))
        else:
            elements.append(Paragraph("No interventions selected.", self._styles['BodyText2']))

        elements.append(Paragraph("Energy by Device Category", self._styles['SectionTitle']))
        rows = [["Category", "Baseline (MWh)", "Projected (MWh)", "Reduction"]]
        for row in result.category_breakdown:
            rows.append([
                row.category.display_name,
                format_number(row.baseline_mwh, 2),
                format_number(row.projected_mwh, 2),
                f"{format_number(row.reduction_pct, 1)}%",
            ])
        elements.append(self._table(rows, [2 * inch, 1.5 * inch, 1.5 * inch, 1 * inch]))
        elements.append(Spacer(1, 0.2 * inch))

        self._maybe_add_chart(elements, chart_paths, 'category_comparison',
                              width=6 * inch, height=3.6 * inch)
        self._maybe_add_chart(elements, chart_paths, 'intervention_savings',
                              width=6 * inch, height=3.6 * inch)
        return elements

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _table(self, rows: list, col_widths: list,
               header_color: colors.Color = DARK_BLUE) -> Table:
        table = Table(rows, colWidths=col_widths)
        table.setStyle(_table_style(header_color))
        return table

    def _maybe_add_chart(self, elements: list, chart_paths: Dict[str, str],
                         chart_key: str, width: float, height: float) -> None:
        """Add a chart image if available, otherwise skip silently."""
        path = chart_paths.get(chart_key)
        if path and os.path.isfile(path):
            try:
                img = Image(path, width=width, height=height)
                elements.append(KeepTogether([img]))
            except Exception:
                logger.warning(
                    "Failed to embed chart '%s'; skipping.", chart_key,
                    exc_info=True,
                )
        elif chart_key in chart_paths:
            logger.warning(
                "Chart file for '%s' not found at '%s'; skipping.",
                chart_key, path,
            )
