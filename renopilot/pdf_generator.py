"""
PDF Painting Cost Report.

Generates the customer-facing report from a calculated project.
Uses fpdf2 (pure Python, no system dependencies).

Sections, always present:
1. Header + Project details
2. Project Summary
3. Surface Breakdown
4. Cost Summary
5. Assumptions & Terms
"""

from datetime import datetime

from fpdf import FPDF

from .config import settings
from .formatting import format_area, format_currency, format_time, format_volume


def _fmt(amount) -> str:
    """Currency, made safe for the built-in PDF fonts."""
    return _safe(format_currency(amount))


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def build_assumptions(project: dict) -> list:
    """Plain-language assumptions printed under the totals."""
    labor_rate = project.get("labor_rate") or {}
    margin = labor_rate.get("profit_margin") or 0
    total_rate = labor_rate.get("total_rate")

    assumptions = [
        "Areas are net of standard openings: doors 2.0 m x 0.9 m, windows 1.599 m x 1.0 m "
        "unless measured sizes were supplied.",
        "Material cost covers every coat; paint volume is total coated area divided by coverage.",
    ]
    if total_rate:
        assumptions.append(
            f"Labor priced on preparation time at {_fmt(total_rate)}/hr "
            f"({labor_rate.get('name') or 'standard rate'})."
        )
    else:
        assumptions.append("No hourly labor rate on file — labor is not included in this report.")
    assumptions.append(f"Profit margin of {margin * 100:.0f}% applied to the combined subtotal.")
    return assumptions


class ReportPDF(FPDF):
    """Custom PDF class for painting cost reports."""

    def __init__(self, company_name="", company_info=""):
        super().__init__()
        self.company_name = company_name
        self.company_info = company_info
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # We handle headers manually per section

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for i, (label, width) in enumerate(cols):
            align = "L" if i == 0 else "R"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths, bold=False):
        """Render a table data row — first column left, numbers right."""
        self.set_font("Helvetica", "B" if bold else "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "L" if i == 0 else "R"
            self.cell(width, 5.5, _safe(str(val)), align=align)
        self.ln()

    def summary_line(self, label, value, bold=False):
        self.set_font("Helvetica", "B" if bold else "", 10)
        self.cell(130, 6, _safe(label))
        self.cell(60, 6, _safe(value), align="R")
        self.ln()


def generate_report_pdf(project: dict, meta: dict = None) -> bytes:
    """
    Generate a PDF painting cost report.

    Args:
        project: PaintingEstimateService.calculate_project() output
                 ({summary, surfaces, labor_rate, formatted})
        meta: optional {project_name, client_name, notes}

    Returns:
        PDF bytes
    """
    meta = meta or {}
    summary = project.get("summary", {})
    surfaces = summary.get("surfaces", [])
    totals = summary.get("totals", {})

    company_name = settings.COMPANY_NAME
    info_parts = [p for p in [settings.COMPANY_PHONE, settings.COMPANY_EMAIL] if p]
    company_info = " | ".join(info_parts)

    pdf = ReportPDF(company_name=company_name, company_info=company_info)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(company_name), new_x="LMARGIN", new_y="NEXT")

    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)

    pdf.ln(4)
    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "Painting Cost Report", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Generated on: {datetime.utcnow().strftime('%B %d, %Y')}",
             new_x="LMARGIN", new_y="NEXT")

    if meta.get("project_name"):
        pdf.cell(0, 5, _safe(f"Project: {meta['project_name']}"), new_x="LMARGIN", new_y="NEXT")
    if meta.get("client_name"):
        pdf.cell(0, 5, _safe(f"Prepared for: {meta['client_name']}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── SECTION 2: Project Summary ──
    total_volume = sum(s["cost_breakdown"]["details"]["paint_volume"] for s in surfaces)
    total_prep = sum(s["cost_breakdown"]["details"]["prep_time"] for s in surfaces)

    pdf.section_header("PROJECT SUMMARY")
    pdf.summary_line("Surfaces", str(len(surfaces)))
    pdf.summary_line("Total paintable area", format_area(totals.get("total_area", 0)))
    pdf.summary_line("Paint required", format_volume(total_volume))
    pdf.summary_line("Preparation time", format_time(total_prep))
    pdf.ln(4)

    # ── SECTION 3: Surface Breakdown ──
    pdf.section_header("SURFACE BREAKDOWN")
    cols = [("Surface", 50), ("Area", 22), ("Paint", 20), ("Prep", 20),
            ("Material", 26), ("Labor", 26), ("Total", 26)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)

    for item in surfaces:
        cb = item["cost_breakdown"]
        name = str(item.get("name", ""))
        short_name = name[:30] if len(name) > 30 else name
        pdf.table_row(
            [
                short_name,
                format_area(item["area"]),
                format_volume(cb["details"]["paint_volume"]),
                format_time(cb["details"]["prep_time"]),
                _fmt(cb["material_cost"]),
                _fmt(cb["labor_cost"]),
                _fmt(cb["total_cost"]),
            ],
            widths,
        )
    pdf.ln(4)

    # ── SECTION 4: Cost Summary ──
    pdf.section_header("COST SUMMARY")
    pdf.summary_line("Materials", _fmt(totals.get("total_material_cost", 0)))
    pdf.summary_line("Labor", _fmt(totals.get("total_labor_cost", 0)))

    pdf.set_draw_color(200, 200, 200)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
    pdf.ln(1)
    pdf.summary_line("Subtotal", _fmt(totals.get("total_subtotal", 0)), bold=True)

    margin_pct = ((project.get("labor_rate") or {}).get("profit_margin") or 0) * 100
    pdf.summary_line(f"Profit margin ({margin_pct:.0f}%)", _fmt(totals.get("total_profit_margin", 0)))

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  GRAND TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(totals.get('grand_total', 0))}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 5: Assumptions & Terms ──
    pdf.section_header("ASSUMPTIONS")
    pdf.set_font("Helvetica", "", 8)
    for a in build_assumptions(project):
        pdf.set_x(pdf.l_margin)
        pdf.multi_cell(pw, 4.5, _safe(f"  - {a}"), new_x="LMARGIN", new_y="NEXT")

    if meta.get("notes"):
        pdf.ln(3)
        pdf.section_header("NOTES")
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(pw, 4.5, _safe(meta["notes"]), new_x="LMARGIN", new_y="NEXT")

    pdf.ln(6)
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.cell(pw, 4, f"This estimate is valid for {settings.REPORT_VALID_DAYS} days from the date above.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
