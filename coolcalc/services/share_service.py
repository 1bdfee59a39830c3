"""
Print-to-file, share and alert collaborators used by the PDF exporter
"""

import os
import sys
import uuid
import asyncio
import logging
from typing import Any, Dict, Optional, Protocol, TextIO

import aiofiles
import pdfkit

from coolcalc.core import config
from coolcalc.services.error_types import ConfigurationError, ExportError

logger = logging.getLogger(__name__)


class PrintService(Protocol):
    async def print_to_file(self, html: str) -> str:
        ...


class ShareService(Protocol):
    async def is_available(self) -> bool:
        ...

    async def share(self, path: str, mime_type: str, dialog_title: str, uti: Optional[str] = None) -> None:
        ...


class Notifier(Protocol):
    def alert(self, title: str, message: str) -> None:
        ...


class PdfkitPrintService:
    """Renders HTML to a uniquely named PDF with wkhtmltopdf"""

    def __init__(
        self,
        output_dir: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
        wkhtmltopdf_path: Optional[str] = None,
        disabled: Optional[bool] = None
    ):
        self.output_dir = output_dir or config.COOLCALC_OUTPUT_DIR
        self.options = dict(options if options is not None else config.PDF_OPTIONS)
        self.wkhtmltopdf_path = wkhtmltopdf_path or config.WKHTMLTOPDF_PATH
        self.disabled = config.DISABLE_PDF if disabled is None else disabled

    def _ensure_output_dir(self) -> None:
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create PDF output directory: {self.output_dir}",
                {'error': str(e)}
            ) from e

    def _new_path(self) -> str:
        return os.path.join(self.output_dir, f"heat_load_{uuid.uuid4().hex[:12]}.pdf")

    async def print_to_file(self, html: str) -> str:
        self._ensure_output_dir()
        output_path = self._new_path()

        if self.disabled:
            # dev stub - write the HTML so the share step still has a file
            html_path = os.path.splitext(output_path)[0] + ".html"
            async with aiofiles.open(html_path, 'w', encoding='utf-8') as f:
                await f.write(html)
            logger.info(f"[PDF] PDF disabled, wrote HTML to {html_path}")
            return html_path

        await asyncio.to_thread(self._render, html, output_path)

        if not os.path.exists(output_path):
            raise ExportError("PDF file not found after rendering", {'path': output_path})
        logger.info(f"[PDF] Rendered {os.path.getsize(output_path)} bytes to {output_path}")
        return output_path

    def _render(self, html: str, output_path: str) -> None:
        pdf_config = pdfkit.configuration(wkhtmltopdf=self.wkhtmltopdf_path)
        pdfkit.from_string(html, output_path, options=self.options, configuration=pdf_config)


class DirectoryShareService:
    """Shares files by copying them into a configured share directory"""

    def __init__(self, share_dir: Optional[str] = None):
        self.share_dir = share_dir if share_dir is not None else config.COOLCALC_SHARE_DIR

    async def is_available(self) -> bool:
        return bool(self.share_dir) and os.path.isdir(self.share_dir)

    async def share(self, path: str, mime_type: str, dialog_title: str, uti: Optional[str] = None) -> None:
        if not await self.is_available():
            raise ExportError("Share directory is not available", {'share_dir': self.share_dir})

        target = os.path.join(self.share_dir, os.path.basename(path))
        try:
            async with aiofiles.open(path, 'rb') as src:
                content = await src.read()
            async with aiofiles.open(target, 'wb') as dst:
                await dst.write(content)
        except OSError as e:
            raise ExportError(f"Failed to share {path}", {'target': target, 'error': str(e)}) from e

        logger.info(f"[SHARE] {dialog_title}: {target} ({mime_type}, uti={uti})")


class ConsoleNotifier:
    """Shows alerts on stderr"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def alert(self, title: str, message: str) -> None:
        logger.warning(f"[ALERT] {title}: {message}")
        print(f"{title}: {message}", file=self.stream or sys.stderr)
