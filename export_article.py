#!/usr/bin/env python3
"""
News Format Exporter - Command Line Entry Point

Converts an article's HTML body into the component document format and
writes the resulting JSON. Bundled assets are listed in the log; copying
them next to the document is left to the publishing workflow.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from config_loader import ConfigLoader, get_nested
from exporter import Exporter
from logger import log_document_summary, log_section, log_settings, setup_logging
from models import ExportContent

__version__ = "1.0.0"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Export an HTML article to the component document format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export with default settings to stdout
  news-format-export article.html

  # Use a settings file and write the document to disk
  news-format-export article.html --config settings.yaml --output article.json

  # Override single settings
  news-format-export article.html --set body_orientation=center --set initial_dropcap=no

  # Verbose logging
  news-format-export article.html -vv
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'article',
        type=str,
        help='Path to the article HTML file'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to settings YAML file (defaults are used when omitted)'
    )

    parser.add_argument(
        '--id',
        type=str,
        help='Article identifier (default: file name without extension)'
    )

    parser.add_argument(
        '--title',
        type=str,
        help='Article title, rendered as the first component'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write the document JSON to this file instead of stdout'
    )

    parser.add_argument(
        '--set',
        action='append',
        metavar='KEY=VALUE',
        help='Override a setting (repeatable)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (-v for INFO, -vv for DEBUG)'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Explicit log level (overrides -v)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        help='Also write logs to this file'
    )

    return parser


def run_export(config: dict, args: argparse.Namespace, logger: logging.Logger) -> int:
    """Execute one export pass and write its output."""
    article_path = Path(args.article)
    html_content = article_path.read_text(encoding='utf-8')

    content = ExportContent(
        id=args.id or article_path.stem,
        title=args.title,
        content=html_content
    )

    settings = ConfigLoader.build_settings(config)
    log_settings(settings)

    log_section("Export")
    result = Exporter(content, settings).export()

    if not result.success:
        logger.error(f"Export failed: {result.error}")
        return 1

    log_document_summary(result.document, result.bundles)

    payload = json.dumps(result.document, ensure_ascii=False, indent=2)
    if args.output:
        Path(args.output).write_text(payload + '\n', encoding='utf-8')
        logger.info(f"Document written to {args.output}")
    else:
        print(payload)

    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        logger = setup_logging(verbosity=args.verbose, level=args.log_level)

        log_section("News Format Exporter")
        logger.info(f"Version: {__version__}")

        config = {}
        if args.config:
            logger.info(f"Loading configuration from {args.config}")
            config = ConfigLoader.load(args.config)

        # CLI arguments take precedence
        config = ConfigLoader.merge_with_args(config, args)
        ConfigLoader.validate(config)

        # Reconfigure logging with config file settings
        logger = setup_logging(
            verbosity=args.verbose,
            log_file=get_nested(config, 'logging.file'),
            level=args.log_level or get_nested(config, 'logging.level')
        )

        return run_export(config, args, logger)

    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        # Subclass of ValueError, so it must be handled first
        print(f"ERROR: Input is not valid UTF-8 text: {e}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nExport interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
