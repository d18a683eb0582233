"""Command-line interface for rendering index pages."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import LayoutConfig, load_config
from .index_page import render_index
from .models import load_document
from .sample_data import demo_document

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render document information and extracted tags as paginated PDF tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=Path,
        default=Path("input.json"),
        help="Path to the input JSON document (default: input.json)",
    )
    source.add_argument(
        "--demo",
        action="store_true",
        help="Render generated sample data instead of an input file",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--out",
        type=Path,
        help="Output PDF path (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for --demo",
    )
    parser.add_argument(
        "--num-tags",
        type=int,
        default=40,
        help="Number of sample tags for --demo",
    )
    parser.add_argument(
        "--legacy-page-order",
        action="store_true",
        help="List pages after the first in reverse order, as older releases did",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    config: LayoutConfig = load_config(args.config)

    # Override with CLI args
    if args.out:
        config.output_path = args.out
    if args.legacy_page_order:
        config.legacy_page_order = True

    if args.demo:
        document = demo_document(seed=args.seed, num_tags=args.num_tags)
    else:
        document = load_document(args.input)

    pages = render_index(document, config)

    print(f"Index written to {config.output_path}")
    print(f"  Pages: {len(pages)}")
    print(f"  Info rows: {len(document.document_info)}")
    print(f"  Tags: {sum(1 for _ in document.iter_tags())}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.exception("Failed to render index: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
