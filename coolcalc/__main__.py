#!/usr/bin/env python3
"""
Command line entry point for CoolCalc

Usage:
    coolcalc parameters.json [--export] [--output-dir DIR] [--share-dir DIR] [--json]

The parameter file holds "room", "product" and "misc" objects
(snake_case or camelCase keys).
"""

import sys
import json
import asyncio
import logging
import argparse
from typing import List, Optional, Tuple

from pydantic import ValidationError

from coolcalc.core.config import setup_logging
from coolcalc.domain.models import MiscParameters, ProductParameters, RoomParameters
from coolcalc.services.error_types import InputFileError, log_error_with_context
from coolcalc.services.freezer_storage import FreezerStorage
from coolcalc.services.pdf_service import generate_and_share_pdf
from coolcalc.services.report_builder import build_freezer_report
from coolcalc.services.results_view import build_results_view, render_results_text
from coolcalc.services.share_service import DirectoryShareService, PdfkitPrintService
from coolcalc.utils.logging_utils import Timer

logger = logging.getLogger(__name__)


def load_parameters(path: str) -> Tuple[RoomParameters, ProductParameters, MiscParameters]:
    """Read and validate the three parameter records from a JSON file"""
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise InputFileError(f"Cannot read parameter file: {path}", {'error': str(e)}) from e
    except json.JSONDecodeError as e:
        raise InputFileError(f"Invalid JSON in parameter file: {path}", {'error': str(e)}) from e

    if not isinstance(data, dict):
        raise InputFileError("Parameter file must contain a JSON object", {'path': path})

    try:
        room = RoomParameters.model_validate(data.get("room") or {})
        product = ProductParameters.model_validate(data.get("product") or {})
        misc = MiscParameters.model_validate(data.get("misc") or {})
    except ValidationError as e:
        raise InputFileError("Invalid parameters", {'path': path, 'errors': e.errors()}) from e

    return room, product, misc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='coolcalc',
        description='Freezer room heat load calculation and PDF heat load sheet export'
    )
    parser.add_argument('parameters', help='JSON file with room, product and misc parameters')
    parser.add_argument('--export', action='store_true', help='Export the heat load sheet as PDF')
    parser.add_argument('--output-dir', help='Directory for generated PDFs')
    parser.add_argument('--share-dir', help='Directory the PDF is shared into')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(debug=True if args.debug else None)

    try:
        room, product, misc = load_parameters(args.parameters)
    except InputFileError as e:
        log_error_with_context(e, {'stage': 'load_parameters'})
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    storage = FreezerStorage(room, product, misc)
    with Timer("heat_load_calculation", logger):
        result = storage.result

    if args.json:
        print(json.dumps(result.to_json(), indent=2))
    else:
        print(render_results_text(build_results_view(result)), end="")

    if args.export:
        document = build_freezer_report(storage.room, storage.product, storage.misc, result)
        path = asyncio.run(generate_and_share_pdf(
            document,
            printer=PdfkitPrintService(output_dir=args.output_dir),
            sharer=DirectoryShareService(share_dir=args.share_dir),
        ))
        if path:
            print(f"Heat load sheet written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
