"""
Command-line interface for projplot package.

Provides argparse-based CLI with subcommands for drawing maps, drawing
lollipop charts, projecting CSV coordinates, and listing projection presets.

Usage:
    projplot map --input world.csv --group group --proj wintri --output world.png
    projplot lollipop --input counts.csv --x year --y count --output counts.png
    projplot project --input points.csv --proj usa_albers --output projected.csv
    projplot presets
"""

import argparse
import io
import sys
import warnings
from contextlib import contextmanager, redirect_stdout, redirect_stderr
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .api import coord_from_config, plot_lollipop, plot_map, project_frame
from .config import Config
from .constants import PROJECTIONS, DEFAULT_ELLIPSOID
from .exceptions import DataError, ProjplotError
from .logging_config import setup_logging


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if getattr(args, 'silent', False):
        verbosity = -2  # ERROR
    elif getattr(args, 'quiet', False):
        verbosity = -1  # WARNING
    elif getattr(args, 'verbose', False):
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    setup_logging(verbosity=verbosity, log_file=getattr(args, 'log_file', None))


def load_config(config_path: Optional[str]) -> Optional[Config]:
    """
    Load configuration from file.

    Args:
        config_path: Path to config file (YAML or JSON)

    Returns:
        Config object or None if no path provided
    """
    if config_path is None:
        return None

    try:
        config = Config.load_from_file(config_path)
        config.validate()
        return config
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading config from {config_path}: {e}", file=sys.stderr)
        sys.exit(1)


def read_table(path: str) -> pd.DataFrame:
    """Read a CSV input file, raising DataError when it cannot be read."""
    try:
        return pd.read_csv(path)
    except (OSError, ValueError) as e:
        raise DataError(f"Failed to read input table {path}: {e}") from e


def _parse_ellps(value: str) -> Optional[str]:
    return None if value.lower() in ("none", "na", "") else value


def _cli_print(args: argparse.Namespace, *values: object, **kwargs) -> None:
    """Print unless --silent was provided."""
    if getattr(args, "silent", False):
        return
    print(*values, **kwargs)


@contextmanager
def _silence_third_party_output(args: argparse.Namespace):
    """Capture noisy stdout/stderr in --silent mode.

    Explicit CLI outputs (final paths) are printed outside this context.
    On exceptions, captured output is forwarded to stderr to aid debugging.
    """

    if not getattr(args, "silent", False):
        yield
        return

    warnings.filterwarnings("ignore")
    buf_out = io.StringIO()
    buf_err = io.StringIO()
    with redirect_stdout(buf_out), redirect_stderr(buf_err):
        try:
            yield
        except Exception:
            sys.stderr.write(buf_err.getvalue())
            sys.stderr.write(buf_out.getvalue())
            raise


def _config_from_args(args: argparse.Namespace) -> Config:
    config = load_config(args.config)
    if config is None:
        config = Config()
    if getattr(args, "dpi", None):
        config.default_dpi = args.dpi
    if getattr(args, "background_color", None):
        config.background_color = args.background_color
    return config


def _coord_from_args(args: argparse.Namespace, config: Optional[Config] = None):
    return coord_from_config(
        config if config is not None else Config(),
        proj=args.proj,
        inverse=args.inverse,
        degrees=not args.radians,
        ellps_default=args.ellps_default,
        xlim=args.xlim,
        ylim=args.ylim,
    )


def _report_success(args: argparse.Namespace, output_path: str, what: str) -> None:
    if getattr(args, "silent", False):
        print(str(output_path))
    else:
        print(f"Success! {what} saved to: {output_path}")


def cmd_map(args: argparse.Namespace) -> int:
    """Handle 'map' subcommand."""
    _cli_print(args, f"Creating map from {args.input}")

    try:
        config = _config_from_args(args)
        data = read_table(args.input)
        coord = _coord_from_args(args, config)

        with _silence_third_party_output(args):
            output_path = plot_map(
                data,
                x=args.x,
                y=args.y,
                group=args.group,
                geom=args.geom,
                coord=coord,
                output_path=args.output,
                config=config
            )

        _report_success(args, output_path, "Map")
        return 0

    except ProjplotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_lollipop(args: argparse.Namespace) -> int:
    """Handle 'lollipop' subcommand."""
    _cli_print(args, f"Creating lollipop chart from {args.input}")

    try:
        config = _config_from_args(args)
        data = read_table(args.input)

        with _silence_third_party_output(args):
            output_path = plot_lollipop(
                data,
                x=args.x,
                y=args.y,
                point_colour=args.point_colour,
                point_size=args.point_size,
                output_path=args.output,
                config=config
            )

        _report_success(args, output_path, "Chart")
        return 0

    except ProjplotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_project(args: argparse.Namespace) -> int:
    """Handle 'project' subcommand."""
    _cli_print(args, f"Projecting {args.x}/{args.y} from {args.input}")

    try:
        data = read_table(args.input)
        coord = _coord_from_args(args)

        projected = project_frame(data, x=args.x, y=args.y, coord=coord)

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        projected.to_csv(output_path, index=False)

        _report_success(args, str(output_path), "Projected table")
        return 0

    except ProjplotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_presets(args: argparse.Namespace) -> int:
    """Handle 'presets' subcommand."""
    for key, preset in PROJECTIONS.items():
        print(f"{key:12s} {preset['name']}")
        if getattr(args, "verbose", False):
            print(f"{'':12s} {preset['proj']}")
    return 0


def _add_projection_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--proj",
        type=str,
        default=None,
        help="PROJ definition or preset name (default: Robinson)"
    )
    p.add_argument(
        "--inverse",
        action="store_true",
        help="Project from cartographic coordinates back to lon/lat"
    )
    p.add_argument(
        "--radians",
        action="store_true",
        help="Lon/lat values are in radians rather than degrees"
    )
    p.add_argument(
        "--ellps-default",
        type=_parse_ellps,
        default=DEFAULT_ELLIPSOID,
        help="Ellipsoid added when the definition has none; 'none' to add nothing"
    )
    p.add_argument(
        "--xlim",
        type=float,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="Longitude limits"
    )
    p.add_argument(
        "--ylim",
        type=float,
        nargs=2,
        metavar=("MIN", "MAX"),
        help="Latitude limits"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="projplot",
        description="Draw map projections and lollipop charts from tabular data",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_globalish_args(p: argparse.ArgumentParser) -> None:
        """Add args that users reasonably expect to work after subcommands too."""
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Suppress INFO logging (WARNING+ only)"
        )
        p.add_argument(
            "--silent",
            action="store_true",
            help="Suppress most console output (prints only final output path)"
        )
        p.add_argument(
            "--log-file",
            type=str,
            help="Write logs to file"
        )

    _add_common_globalish_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # map subcommand
    # ========================================================================
    parser_map = subparsers.add_parser(
        "map",
        help="Draw lon/lat data on a map projection"
    )
    _add_common_globalish_args(parser_map)
    parser_map.add_argument("--input", type=str, required=True, help="Input CSV file")
    parser_map.add_argument("--x", type=str, default="long", help="Longitude column (default: long)")
    parser_map.add_argument("--y", type=str, default="lat", help="Latitude column (default: lat)")
    parser_map.add_argument("--group", type=str, default=None, help="Column separating paths")
    parser_map.add_argument(
        "--geom",
        choices=["path", "point"],
        default="path",
        help="How to draw the rows (default: path)"
    )
    _add_projection_args(parser_map)
    parser_map.add_argument("--output", type=str, required=True, help="Output file path")
    parser_map.add_argument("--config", type=str, help="Config file path (YAML/JSON)")
    parser_map.add_argument("--dpi", type=int, help="Override DPI setting")
    parser_map.add_argument("--background-color", type=str, default=None, help="Figure background color")
    parser_map.set_defaults(func=cmd_map)

    # ========================================================================
    # lollipop subcommand
    # ========================================================================
    parser_lollipop = subparsers.add_parser(
        "lollipop",
        help="Draw a lollipop chart"
    )
    _add_common_globalish_args(parser_lollipop)
    parser_lollipop.add_argument("--input", type=str, required=True, help="Input CSV file")
    parser_lollipop.add_argument("--x", type=str, required=True, help="Position column")
    parser_lollipop.add_argument("--y", type=str, required=True, help="Value column")
    parser_lollipop.add_argument("--point-colour", type=str, default=None, help="Point colour")
    parser_lollipop.add_argument("--point-size", type=float, default=None, help="Point size (mm)")
    parser_lollipop.add_argument("--output", type=str, required=True, help="Output file path")
    parser_lollipop.add_argument("--config", type=str, help="Config file path (YAML/JSON)")
    parser_lollipop.add_argument("--dpi", type=int, help="Override DPI setting")
    parser_lollipop.add_argument("--background-color", type=str, default=None, help="Figure background color")
    parser_lollipop.set_defaults(func=cmd_lollipop)

    # ========================================================================
    # project subcommand
    # ========================================================================
    parser_project = subparsers.add_parser(
        "project",
        help="Project coordinate columns of a CSV file"
    )
    _add_common_globalish_args(parser_project)
    parser_project.add_argument("--input", type=str, required=True, help="Input CSV file")
    parser_project.add_argument("--x", type=str, default="long", help="x/longitude column (default: long)")
    parser_project.add_argument("--y", type=str, default="lat", help="y/latitude column (default: lat)")
    _add_projection_args(parser_project)
    parser_project.add_argument("--output", type=str, required=True, help="Output CSV path")
    parser_project.set_defaults(func=cmd_project)

    # ========================================================================
    # presets subcommand
    # ========================================================================
    parser_presets = subparsers.add_parser(
        "presets",
        help="List named projection presets"
    )
    _add_common_globalish_args(parser_presets)
    parser_presets.set_defaults(func=cmd_presets)

    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    setup_logging_from_args(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
