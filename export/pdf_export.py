from __future__ import annotations
from datetime import date
from typing import Optional
from reportlab.lib.pagesizes import LETTER
from reportlab.lib import colors
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet
from core.presets import DISCLAIMER

_GRID = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
    ('BOX', (0, 0), (-1, -1), 1, colors.black),
    ('INNERGRID', (0, 0), (-1, -1), 0.5, colors.grey),
])


def build_analysis_pdf(out_path, report: dict, generated_on: Optional[date] = None):
    """Render ``report`` (see ``export.text_export.report_payload``) to ``out_path``.

    ``out_path`` may be a filename or a writable binary buffer.
    """
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(out_path, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    generated_on = generated_on or date.today()
    story = [Paragraph(f"<b>{report.get('title', 'Analysis Results')}</b>", styles['Title']), Spacer(1, 6)]
    story += [Paragraph(f"Generated on: {generated_on.strftime('%m/%d/%Y')}", styles['Normal']), Spacer(1, 12)]
    for heading, rows in report.get("sections", []):
        if not rows:
            continue
        t = Table([[heading, ""]] + [[label, value] for label, value in rows], hAlign='LEFT', colWidths=[200, 320])
        t.setStyle(_GRID)
        story += [t, Spacer(1, 12)]
    warnings = report.get("warnings", [])
    if warnings:
        w_rows = [["Code", "Message"]] + [[w.get("code", ""), w.get("message", "")] for w in warnings]
        t = Table(w_rows, hAlign='LEFT', colWidths=[140, 380])
        t.setStyle(_GRID)
        story += [Paragraph("<b>Warnings</b>", styles['Heading3']), Spacer(1, 6), t, Spacer(1, 12)]
    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles['Normal'])]
    doc.build(story)
    return out_path
