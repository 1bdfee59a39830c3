"""
Heat load sheet export: ReportDocument -> HTML -> PDF -> share target
"""

import os
import logging
from datetime import datetime
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape

from coolcalc.domain.report_models import ReportDocument, ReportItem
from coolcalc.services.share_service import (
    ConsoleNotifier,
    DirectoryShareService,
    Notifier,
    PdfkitPrintService,
    PrintService,
    ShareService,
)
from coolcalc.utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'html_templates')
TEMPLATE_NAME = 'report.html'

BRAND_NAME = "Enzo CoolCalc"
WATERMARK = "ENZO"
SHEET_TITLE = "Heat Load Sheet"
FOOTER_NOTE = "Excel Matching Calculations"
LOGO_DATA_URI = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk"
    "YPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

PDF_MIME_TYPE = "application/pdf"
PDF_UTI = "com.adobe.pdf"

ALERT_TITLE = "Error"
SHARING_UNAVAILABLE_MESSAGE = "Sharing is not available on this device"
EXPORT_FAILED_MESSAGE = "Failed to generate PDF. Please try again."

_jinja_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(['html']),
)


def find_headline(document: ReportDocument) -> Optional[ReportItem]:
    """First highlighted row across the result sections, in document order"""
    return next((item for item in document.result_items if item.is_highlighted), None)


def headline_text(document: ReportDocument) -> Tuple[str, str]:
    """(label, 'value unit') of the headline figure, or the placeholder pair"""
    item = find_headline(document)
    if item is None:
        return "Final Load", "N/A"
    return item.label, f"{item.value} {item.unit}"


def generate_html_content(document: ReportDocument, generated_on: Optional[datetime] = None) -> str:
    """
    Render a report document as a self-contained A4 HTML page.

    Args:
        document: Title and sections to render
        generated_on: Date printed in the header (defaults to now)

    Returns:
        Complete HTML document string
    """
    generated_on = generated_on or datetime.now()
    template = _jinja_env.get_template(TEMPLATE_NAME)
    return template.render(
        title=document.title,
        subtitle=document.subtitle,
        inputs=document.inputs,
        sections=document.sections,
        brand_name=BRAND_NAME,
        watermark=WATERMARK,
        sheet_title=SHEET_TITLE,
        footer_note=FOOTER_NOTE,
        logo_data_uri=LOGO_DATA_URI,
        generated_on=generated_on.strftime('%d/%m/%Y'),
    )


async def generate_and_share_pdf(
    document: ReportDocument,
    printer: Optional[PrintService] = None,
    sharer: Optional[ShareService] = None,
    notifier: Optional[Notifier] = None
) -> Optional[str]:
    """
    Export a report document as PDF and hand it to the share service.

    Every failure ends in one generic alert; nothing is raised to the caller.

    Returns:
        Path of the produced file, or None when generation failed
    """
    printer = printer or PdfkitPrintService()
    sharer = sharer or DirectoryShareService()
    notifier = notifier or ConsoleNotifier()

    label, value = headline_text(document)
    pdf_path: Optional[str] = None
    try:
        with log_operation("pdf_export", {'title': document.title, 'headline': f"{label}: {value}"}, logger):
            html_content = generate_html_content(document)
            pdf_path = await printer.print_to_file(html_content)

            if await sharer.is_available():
                await sharer.share(
                    pdf_path,
                    mime_type=PDF_MIME_TYPE,
                    dialog_title=f"Share {document.title}",
                    uti=PDF_UTI,
                )
            else:
                notifier.alert(ALERT_TITLE, SHARING_UNAVAILABLE_MESSAGE)
    except Exception:
        logger.exception("Error generating PDF")
        notifier.alert(ALERT_TITLE, EXPORT_FAILED_MESSAGE)
        return None

    return pdf_path
