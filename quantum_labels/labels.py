import io

import pypdfium2 as pdfium
from loguru import logger
from reportlab.graphics import renderPDF
from reportlab.graphics.barcode import qr
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, letter, mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from quantum_labels.config import get_settings

FONT_VARIANTS = {
    "Helvetica": {
        "regular": "Helvetica",
        "bold": "Helvetica-Bold",
    },
    "Times-Roman": {
        "regular": "Times-Roman",
        "bold": "Times-Bold",
    },
    "Courier": {
        "regular": "Courier",
        "bold": "Courier-Bold",
    },
}

LABEL_PADDING_MM = 3

# (caption, record attribute) for the detail lines under the supplier heading
DETAIL_LINES = (
    ("DESENHO:", "draw"),
    ("TAG:", "equipament"),
    ("SKU:", "sku"),
    ("DESCRIÇÃO:", "description"),
)


def font_variant(base_font, variant):
    return FONT_VARIANTS.get(base_font, FONT_VARIANTS["Helvetica"]).get(variant, base_font)


def fit_text(text, font, font_size, max_width):
    """Trim ``text`` so it fits in ``max_width`` points, ending in '...'."""
    text = str(text)
    if stringWidth(text, font, font_size) <= max_width:
        return text
    while text and stringWidth(text + "...", font, font_size) > max_width:
        text = text[:-1]
    return text + "..."


def build_qr_drawing(payload, size_pt):
    qrobj = qr.QrCodeWidget(payload)
    b = qrobj.getBounds()
    scale = size_pt / max(b[2] - b[0], b[3] - b[1])
    d = Drawing(size_pt, size_pt, transform=[scale, 0, 0, scale, 0, 0])
    d.add(qrobj)
    return d


# ======================================================
# Draw a single label block onto a ReportLab canvas
# ======================================================

def draw_label_on_canvas(
    c,
    record,
    x,
    y,
    qr_drawing=None,
    qr_image_path=None,
    label_font="Helvetica",
    label_font_size=10,
    label_width=180,
    label_height=45,
    qr_size=35,
    padding=LABEL_PADDING_MM,
    show_border=True,
):
    lw_pt = label_width * mm
    lh_pt = label_height * mm
    pad_pt = padding * mm
    qr_pt = min(qr_size * mm, lh_pt - 2 * pad_pt)

    # ---- 1. Outer border ----
    if show_border:
        c.saveState()
        c.setStrokeColor(colors.lightgrey)
        c.setLineWidth(0.5)
        c.rect(x, y, lw_pt, lh_pt, stroke=1, fill=0)
        c.restoreState()

    # ---- 2. Static QR code, centred in the right third ----
    code_col_width = lw_pt / 3
    code_x = x + lw_pt - code_col_width + (code_col_width - qr_pt) / 2
    code_y = y + (lh_pt - qr_pt) / 2
    if qr_image_path is not None:
        c.drawImage(
            str(qr_image_path), code_x, code_y, qr_pt, qr_pt,
            preserveAspectRatio=True, anchor="c", mask="auto",
        )
    elif qr_drawing is not None:
        renderPDF.draw(qr_drawing, c, code_x, code_y)

    # ---- 3. Text rows ----
    text_x = x + pad_pt
    avail_w = lw_pt - code_col_width - 2 * pad_pt
    heading_size = label_font_size + 2
    row_height = label_font_size * 1.4
    y_pos = y + lh_pt - pad_pt - heading_size

    c.saveState()
    c.setFillColor(colors.black)
    bold = font_variant(label_font, "bold")
    regular = font_variant(label_font, "regular")

    c.setFont(bold, heading_size)
    c.drawString(text_x, y_pos, fit_text(f"Fornecedor: {record.supplier}", bold, heading_size, avail_w))
    y_pos -= heading_size * 1.6

    for caption, attr in DETAIL_LINES:
        c.setFont(bold, label_font_size)
        c.drawString(text_x, y_pos, caption)
        caption_w = stringWidth(caption + " ", bold, label_font_size)
        c.setFont(regular, label_font_size)
        value = fit_text(getattr(record, attr), regular, label_font_size, avail_w - caption_w)
        c.drawString(text_x + caption_w, y_pos, value)
        y_pos -= row_height
    c.restoreState()


# ======================================================
# Multi-label PDF sheet
# ======================================================

def page_geometry(page_format, label_width, label_height):
    if page_format == "A4":
        page_width, page_height = A4
        margin = 5 * mm
    elif page_format == "Letter":
        page_width, page_height = letter
        margin = 5 * mm
    elif page_format == "LabelPrinter":
        # Exact label size, no margin
        page_width = label_width * mm
        page_height = label_height * mm
        margin = 0
    else:
        raise ValueError(f"Unknown page format: {page_format!r}")
    return page_width, page_height, margin


def render_label_sheet(records, settings=None):
    """Render one label block per entry of ``records`` and return PDF bytes."""
    settings = settings or get_settings()
    label_width = settings.label_width_mm
    label_height = settings.label_height_mm
    page_width, page_height, margin = page_geometry(settings.page_format, label_width, label_height)

    qr_image_path = settings.qr_image_path
    qr_drawing = None
    if qr_image_path is None:
        qr_size = min(settings.qr_size_mm, label_height - 2 * LABEL_PADDING_MM)
        qr_drawing = build_qr_drawing(settings.qr_payload, qr_size * mm)

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(page_width, page_height))
    c.setTitle("Etiquetas")

    x = margin
    y = page_height - label_height * mm - margin

    for index, record in enumerate(records):
        if index and y < margin:
            c.showPage()
            x = margin
            y = page_height - label_height * mm - margin

        draw_label_on_canvas(
            c, record, x, y,
            qr_drawing=qr_drawing,
            qr_image_path=qr_image_path,
            label_font=settings.label_font,
            label_font_size=settings.label_font_size,
            label_width=label_width,
            label_height=label_height,
            qr_size=settings.qr_size_mm,
        )

        x += label_width * mm + margin
        if x + label_width * mm > page_width:
            x = margin
            y -= label_height * mm + margin

    c.save()
    logger.debug(f"Rendered {len(records)} labels on {settings.page_format} pages")
    return buffer.getvalue()


def render_preview(pdf_bytes, page_index=0, scale=2):
    pdf = pdfium.PdfDocument(io.BytesIO(pdf_bytes))
    return pdf[page_index].render(scale=scale).to_pil()
