import argparse
import logging
import sys

import config
from barycentric import BarycentricCalculator
from elements import Point2D, Triangle
from errors import DegenerateTriangleError
from triangle_mesh import TriangleMesh

logger = logging.getLogger("barycentric")

DEMO_TRIANGLE = ("100,0", "0,140", "200,90")
DEMO_POINT = "20,60"


def parse_point(text):
    try:
        x, y = (float(s) for s in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    return Point2D(x, y)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="barycentric",
        description="Barycentric coordinates and point-in-triangle test",
    )
    parser.add_argument(
        "--point", type=parse_point, default=parse_point(DEMO_POINT),
        help=f"Query point X,Y (default: {DEMO_POINT})",
    )
    parser.add_argument(
        "--triangle", type=parse_point, nargs=3, metavar=("A", "B", "C"),
        default=[parse_point(s) for s in DEMO_TRIANGLE],
        help="Triangle vertices as X,Y X,Y X,Y (default: %s)" % " ".join(DEMO_TRIANGLE),
    )
    parser.add_argument(
        "--centroid", action="store_true",
        help="Query the triangle centroid instead of --point",
    )
    parser.add_argument(
        "--mesh", default=None,
        help="Locate the point in an OBJ triangle mesh instead of --triangle",
    )
    parser.add_argument(
        "--epsilon", type=float, default=config.EPSILON,
        help=f"Edge classification tolerance (default: {config.EPSILON})",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )
    return parser


def run_triangle(args, calc):
    tri = Triangle.of(*args.triangle)
    p = tri.centroid() if args.centroid else args.point
    result = calc.compute(p, *tri)
    location = calc.classify(result)
    print(f"u={result.u:.6f} v={result.v:.6f} w={result.w:.6f}")
    print(location.describe())


def run_mesh(args, calc):
    mesh = TriangleMesh()
    mesh.read_obj(args.mesh)
    hit = mesh.locate_point(args.point, calc)
    if hit is None:
        print("Point is OUTSIDE the mesh")
        return
    i, result = hit
    print(f"triangle={i} u={result.u:.6f} v={result.v:.6f} w={result.w:.6f}")
    print(calc.classify(result).describe())


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mesh and args.centroid:
        parser.error("--centroid cannot be combined with --mesh")

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format=config.LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    calc = BarycentricCalculator(epsilon=args.epsilon)
    try:
        if args.mesh:
            logger.info("Locating %s in %s", tuple(args.point), args.mesh)
            run_mesh(args, calc)
        else:
            run_triangle(args, calc)
    except (DegenerateTriangleError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
