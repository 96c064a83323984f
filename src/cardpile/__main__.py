"""Main entry point for cardpile."""

import argparse
import json
import logging
import sys
from pathlib import Path

from cardpile.errors import CardPileError, validate_range
from cardpile.layout.engine import PileLayoutEngine
from cardpile.model.controls import PileControls
from cardpile.model.settings import PileSettings, load_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="cardpile",
        description="Card pile layout - positions cards along a curved line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        metavar="PATH",
        help="JSON pile settings file (default: built-in settings)",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        metavar="N",
        help="Override the max number of cards",
    )
    parser.add_argument(
        "--nodes",
        type=float,
        default=0.0,
        metavar="AMOUNT",
        help="Fraction of max cards shown, 0 to 1 (default: 0)",
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=1.0,
        metavar="AMOUNT",
        help="Fraction of max card spacing used, 0 to 1 (default: 1)",
    )
    parser.add_argument(
        "--curvature",
        type=float,
        default=0.0,
        metavar="AMOUNT",
        help="Signed fraction of max curvature, -1 to 1 (default: 0)",
    )
    parser.add_argument(
        "--theme",
        default="felt",
        help="Preview theme (default: felt)",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the laid out cards as JSON instead of opening a window",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> PileSettings:
    """Load settings and apply command line overrides.

    Args:
        args: Parsed arguments

    Returns:
        Validated pile settings

    Raises:
        SettingsError: If the settings file or overrides are invalid
    """
    if args.settings is not None:
        settings = load_settings(args.settings, strict=True)
    else:
        settings = PileSettings()

    if args.max_nodes is not None:
        settings.max_nodes = args.max_nodes

    settings.validate()
    return settings


def build_controls(args: argparse.Namespace) -> PileControls:
    """Create controls from command line amounts.

    Raises:
        ValidationError: If an amount is out of range
    """
    validate_range(args.nodes, 0.0, 1.0, "nodes")
    validate_range(args.spacing, 0.0, 1.0, "spacing")
    validate_range(args.curvature, -1.0, 1.0, "curvature")
    return PileControls(
        nodes_amount=args.nodes,
        node_spacing_amount=args.spacing,
        curvature_amount=args.curvature,
    )


def dump_layout(settings: PileSettings, controls: PileControls) -> dict:
    """Lay out a pile headless.

    Args:
        settings: Pile settings
        controls: Control amounts

    Returns:
        JSON compatible description of every node
    """
    engine = PileLayoutEngine(settings, controls=controls)
    engine.update()
    return {
        "node_count": len(engine),
        "nodes": [
            {"index": index, **transform.to_dict()}
            for index, transform in enumerate(engine.transforms())
        ],
    }


def run_preview(settings: PileSettings, controls: PileControls, theme_name: str) -> int:
    """Open the preview window.

    Returns:
        Exit code
    """
    # Qt is only needed for the window
    from PyQt6.QtWidgets import QApplication

    from cardpile.controller.controller import Controller
    from cardpile.view.theme import get_theme

    theme = get_theme(theme_name)

    app = QApplication(sys.argv)
    controller = Controller(settings, controls, theme)
    controller.start()
    controller.show()

    return app.exec()


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = build_settings(args)
        controls = build_controls(args)
    except CardPileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump:
        json.dump(dump_layout(settings, controls), sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    try:
        return run_preview(settings, controls, args.theme)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
