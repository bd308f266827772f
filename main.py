"""Main entry point for the e8-visualizer library."""

import argparse
import logging
import sys

from e8_visualizer.config import VIEW_2D_DISPLAY_OPTIONS


def parse_angles(text):
    """Parse a comma separated list of angles in radians."""
    try:
        return [float(value) for value in text.split(",") if value.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid angle list: {text!r}")


def print_summary():
    from e8_visualizer import generate_root_system, root_summary

    system = generate_root_system()
    summary = root_summary(system)

    print("E8 Root System")
    print("==============")
    print(f"  Roots: {summary['num_roots']}")
    print(f"    integer-type: {summary['integer_roots']}")
    print(f"    half-integer-type: {summary['half_integer_roots']}")
    print(f"  Dimension: {summary['dimension']}")
    print(f"  Rank: {summary['rank']}")
    print(f"  Weyl group order: {summary['weyl_group_order']}")
    print(f"  Squared root lengths: {summary['squared_norms']}")
    print("  Cartan matrix:")
    for row in system.cartan_matrix:
        print("    " + " ".join(f"{v:2d}" for v in row))


def plot(mode, angles=None, roots=None, save_path=None):
    from e8_visualizer import (
        DEFAULT_PLANES,
        generate_root_system,
        plane_pairs,
        plot_projection,
        view_2d,
        view_3d,
    )

    system = generate_root_system()

    if mode == "2d":
        n_planes = len(plane_pairs(system.dimension))
        angles = angles if angles is not None else [0.0] * n_planes
        frame = view_2d(system, angles, max_roots=roots)
        title = f"E8 Root System Projection (2D, {len(frame.points)} roots)"
    else:
        angles = angles if angles is not None else [0.0] * len(DEFAULT_PLANES)
        frame = view_3d(system, angles)
        title = "E8 Root System Projection (3D)"

    plot_projection(frame, title=title, save_path=save_path, show=save_path is None)


def main(argv=None):
    """Main CLI for e8-visualizer library."""
    parser = argparse.ArgumentParser(
        description="E8 Visualizer: rotate and project the E8 root system"
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information"
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Show available examples"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the root system summary"
    )
    parser.add_argument(
        "--plot",
        choices=["2d", "3d"],
        help="Render one projection of the root system"
    )
    parser.add_argument(
        "--angles",
        type=parse_angles,
        help="Comma separated rotation angles in radians (28 for 2d, 8 for 3d)"
    )
    parser.add_argument(
        "--roots",
        type=int,
        default=None,
        help="Number of roots to show, 2d only, e.g. "
        + ", ".join(str(n) for n in VIEW_2D_DISPLAY_OPTIONS)
        + " (default: all)"
    )
    parser.add_argument(
        "--save",
        metavar="PATH",
        help="Save the plot instead of showing it"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)
    if args.roots is not None and args.plot != "2d":
        parser.error("--roots only applies to --plot 2d")

    from e8_visualizer import setup_logging
    setup_logging(logging.DEBUG if args.verbose else None)

    if args.version:
        from e8_visualizer import __version__
        print(f"e8-visualizer version {__version__}")
    elif args.examples:
        print("Available examples:")
        print("  python examples/e8_projection_2d.py")
        print("  python examples/e8_rotation_3d.py")
        print("\nRun with UV:")
        print("  uv run python examples/e8_projection_2d.py")
    elif args.summary:
        print_summary()
    elif args.plot:
        try:
            plot(args.plot, angles=args.angles, roots=args.roots, save_path=args.save)
        except ValueError as e:
            logging.getLogger("e8_visualizer").error(str(e))
            return 1
    else:
        print("E8 Visualizer Library")
        print("=====================")
        print("A Python library for rotating and projecting the E8 root system.")
        print("\nQuick start:")
        print("  import e8_visualizer")
        print("  help(e8_visualizer)")
        print("\nFor examples, run: python main.py --examples")
        print("For the root system, run: python main.py --summary")
        print("For version info: python main.py --version")

    return 0


if __name__ == "__main__":
    sys.exit(main())
