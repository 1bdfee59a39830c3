import os
import logging
import sys
import tempfile
from typing import Any, Dict, Optional

from coolcalc.core.environment import get_env_bool, get_env_str, load_environment

load_environment()

DEBUG = get_env_bool("DEBUG", False)

# Write HTML instead of PDF when wkhtmltopdf is not installed locally
DISABLE_PDF = get_env_bool("DISABLE_PDF", False)

WKHTMLTOPDF_PATH = get_env_str("WKHTMLTOPDF_PATH", "/usr/local/bin/wkhtmltopdf")

COOLCALC_OUTPUT_DIR = get_env_str(
    "COOLCALC_OUTPUT_DIR", os.path.join(tempfile.gettempdir(), "coolcalc")
)

# Unset means no share target is available on this machine
COOLCALC_SHARE_DIR: Optional[str] = get_env_str("COOLCALC_SHARE_DIR")

# wkhtmltopdf options matching the A4 heat load sheet layout
PDF_OPTIONS: Dict[str, Any] = {
    'page-size': 'A4',
    'margin-top': '10mm',
    'margin-right': '10mm',
    'margin-bottom': '10mm',
    'margin-left': '10mm',
    'encoding': "UTF-8",
    'no-outline': None,
    'print-media-type': None,
}


def setup_logging(debug: Optional[bool] = None) -> logging.Logger:
    """Configure application logging"""
    if debug is None:
        debug = DEBUG
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

    logger = logging.getLogger('coolcalc')
    logger.setLevel(log_level)

    # wkhtmltopdf wrapper is chatty at DEBUG
    logging.getLogger('pdfkit').setLevel(logging.WARNING)

    return logger
