"""
Command line entry point.

Usage:
    python -m property_doc_filler serve --port 5000
    python -m property_doc_filler generate --full-name "Jane Doe" \
        --address "1 Main St" --date 2024-05-01 --price "$350,000"
    python -m property_doc_filler inspect --template document_template.pdf
"""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import List, Optional

from .config import Config, configure_logging, ensure_directories
from .errors import DocumentFillerError
from .filler import generate
from .pdf_utils import extract_text_lines, pdf_page_count, pdf_page_sizes
from .placements import OVERLAY_PLACEMENTS, load_field_mappings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill the property document template.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP service.")
    serve.add_argument("--host", default=None, help="Bind address (defaults to HOST).")
    serve.add_argument("--port", type=int, default=None, help="Port (defaults to PORT).")

    gen = subparsers.add_parser("generate", help="Generate one document without the HTTP service.")
    gen.add_argument("--full-name", dest="fullName", default="", help="Full name.")
    gen.add_argument("--address", default="", help="Property address.")
    gen.add_argument("--date", default="", help="Date as display text.")
    gen.add_argument("--price", default="", help="Price as display text.")

    inspect = subparsers.add_parser("inspect", help="Show page sizes and positioned text of a PDF.")
    inspect.add_argument("--template", type=Path, default=None, help="PDF to inspect (defaults to TEMPLATE_PATH).")

    return parser.parse_args(argv)


def run_serve(config: Config, host: Optional[str], port: Optional[int]) -> int:
    import uvicorn

    from .api import create_app

    if port is not None:
        config.PORT = port
        if "PUBLIC_BASE_URL" not in os.environ:
            config.PUBLIC_BASE_URL = f"http://localhost:{port}"
    uvicorn.run(create_app(config), host=host or config.HOST, port=config.PORT)
    return 0


def run_generate(config: Config, args: argparse.Namespace) -> int:
    paths = config.paths()
    ensure_directories(paths)
    placements = (
        load_field_mappings(config.OVERLAY_MAPPING_PATH)
        if config.OVERLAY_MAPPING_PATH
        else OVERLAY_PLACEMENTS
    )
    fields = {key: getattr(args, key) for key in ("fullName", "address", "date", "price")}
    try:
        reference = generate(fields, paths, config.PUBLIC_BASE_URL, placements)
    except DocumentFillerError as e:
        print(json.dumps(e.to_dict(), indent=2))
        return 1
    print(reference.model_dump_json(by_alias=True, indent=2))
    return 0


def run_inspect(config: Config, template: Optional[Path]) -> int:
    path = template or config.paths().template
    if not path.is_file():
        print(f"File not found: {path}")
        return 1

    print(f"{path}: {pdf_page_count(path)} page(s)")
    lines = extract_text_lines(path)
    for page_index, (width, height) in enumerate(pdf_page_sizes(path)):
        print(f"\nPage {page_index} ({width:.1f} x {height:.1f})")
        for line in lines:
            if line.page_index == page_index:
                print(f"  x={line.x0:7.1f} top={line.y0:7.1f} bottom={line.y1:7.1f}  {line.text}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = Config()
    configure_logging(config.LOG_LEVEL)

    if args.command == "serve":
        return run_serve(config, args.host, args.port)
    if args.command == "generate":
        return run_generate(config, args)
    return run_inspect(config, args.template)
