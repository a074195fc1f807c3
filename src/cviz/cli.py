"""Serve a classification results file as a browsable gallery.

Usage::

    cviz results.json
    cviz results.json --port 8080 --limit 50 --no-browser
    python -m cviz results.json --colors random --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cviz.config import ViewerConfig
from cviz.errors import BrowserLaunchError, ConfigError, CvizError
from cviz.io.input import load_input
from cviz.schemas.view import ViewModel
from cviz.server.app import create_app
from cviz.server.browser import open_url
from cviz.server.runner import GalleryServer
from cviz.view_model import build_from_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cviz", description="Browse classification results in a local gallery"
    )
    parser.add_argument("input", help="Results JSON with 'classes' and 'objects'")
    parser.add_argument(
        "--host", default="127.0.0.1", help="Loopback address (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2849,
        help="Port, 0 for any free port (default: 2849)",
    )
    parser.add_argument(
        "--limit", type=int, default=20, help="Objects per page (default: 20)"
    )
    parser.add_argument(
        "--max-scores",
        type=int,
        default=6,
        help="Leading per-class scores considered for ranking (default: 6)",
    )
    parser.add_argument(
        "--colors",
        choices=["palette", "random"],
        default="palette",
        help="Class color strategy (default: palette)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for --colors random"
    )
    parser.add_argument(
        "--no-browser", action="store_true", help="Don't open the browser"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    return parser


def setup_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
    # werkzeug logs every request through stdlib logging
    logging.getLogger("werkzeug").setLevel(
        logging.DEBUG if level == "DEBUG" else logging.WARNING
    )


def config_from_args(args: argparse.Namespace) -> ViewerConfig:
    try:
        return ViewerConfig(
            host=args.host,
            port=args.port,
            default_limit=args.limit,
            max_scores=args.max_scores,
            color_strategy=args.colors,
            color_seed=args.seed,
            open_browser=not args.no_browser,
        )
    except ValidationError as e:
        raise ConfigError(f"invalid options:\n{e}") from e


def print_summary(view_model: ViewModel, console: Console | None = None) -> None:
    """Print a Rich table of classes with prediction and label counts."""
    console = console or Console()
    predicted = Counter(obj.predicted.index for obj in view_model.objects)
    labeled = Counter(
        obj.ground_truth.class_id
        for obj in view_model.objects
        if obj.ground_truth is not None
    )

    table = Table(title=f"{len(view_model.objects)} objects")
    table.add_column("Index", justify="right")
    table.add_column("Class", style="cyan")
    table.add_column("Color")
    table.add_column("Predicted", justify="right")
    table.add_column("Labeled", justify="right")
    for cls in view_model.classes:
        table.add_row(
            str(cls.index),
            escape(cls.name),
            f"[{cls.color}]■[/] {cls.color}",
            str(predicted.get(cls.index, 0)),
            str(labeled.get(cls.index, 0)),
        )
    console.print(table)

    if view_model.accuracy is not None:
        console.print(
            f"Accuracy: [green]{view_model.accuracy:.1%}[/] "
            f"({view_model.correct_count}/{view_model.labeled_count} labeled)"
        )


def serve(view_model: ViewModel, config: ViewerConfig) -> int:
    """Serve until the listener stops or the process is interrupted."""
    server = GalleryServer(create_app(view_model, config), config.host, config.port)
    server.start()
    Console().print(f"Opening cviz at: {server.url}")

    if config.open_browser:
        try:
            open_url(server.url)
        except BrowserLaunchError as e:
            logger.warning(f"{e}; open {server.url} manually")

    try:
        server.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        server.shutdown()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = config_from_args(args)
        document = load_input(args.input)
        view_model = build_from_document(document, config)
        print_summary(view_model)
        return serve(view_model, config)
    except CvizError as e:
        logger.error(str(e))
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
