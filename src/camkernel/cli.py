"""
Command-line projection of world points through a configured camera.

Usage:
    camkernel-project --config camera.yaml --point 0 0 0 --point 1 0 0
    camkernel-project -c camera.yaml -p 0 0 0 --focal 500 --debug
"""

import argparse
import sys
from typing import List, Optional

from .camera.config import CameraConfig, load_camera_config, make_camera_from_config
from .camera.utils import format_matrix
from .errors import CameraError


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="camkernel-project",
        description="Project world points to pixel coordinates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  camkernel-project --config camera.yaml --point 0 0 0
  camkernel-project -c camera.yaml -p 0 0 0 -p 1 2 3 --focal 800
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML camera configuration file"
    )

    parser.add_argument(
        "--point", "-p",
        type=float,
        nargs=3,
        action="append",
        metavar=("X", "Y", "Z"),
        required=True,
        help="World point to project (repeatable)"
    )

    parser.add_argument(
        "--focal",
        type=float,
        default=None,
        help="Override focal length from config"
    )

    parser.add_argument(
        "--width",
        type=float,
        default=None,
        help="Override image width from config"
    )

    parser.add_argument(
        "--height",
        type=float,
        default=None,
        help="Override image height from config"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print matrices as they are set"
    )

    return parser.parse_args(argv)


def apply_cli_overrides(config: CameraConfig, args) -> CameraConfig:
    """Apply command-line argument overrides to config"""
    if args.focal is not None:
        config.focal = args.focal
    if args.width is not None:
        config.width = args.width
    if args.height is not None:
        config.height = args.height
    return config


def print_matrix(name: str, matrix) -> None:
    """Matrix dump used by --debug."""
    print(format_matrix(name, matrix))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    on_update = print_matrix if args.debug else None

    try:
        config = load_camera_config(args.config) if args.config else CameraConfig()
        config = apply_cli_overrides(config, args)
        camera = make_camera_from_config(config, on_update=on_update)
        projected = camera.project_points(args.point)
    except (CameraError, FileNotFoundError) as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1

    for px, py, depth in projected:
        print(f"{px:.6f} {py:.6f} {depth:.6f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
