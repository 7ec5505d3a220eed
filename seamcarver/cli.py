"""
Command line front end.

    seamcarver -s 50 [-v | -H] [-e gradient|dualGradient|sobel] [-l] IMAGE...

Every input image is carved and written to '<IMAGE>-out-<seams>.png'.
"""

import argparse
import logging
import sys

from .carving import SeamCarver
from .config import Axis, CarvingConfig, EnergyStrategy
from .diagnostics import LoggingReporter
from .errors import SeamCarvingError
from .image_io import load_image, output_path, save_image, show_image

logger = logging.getLogger('seamcarver')


def _positive_int(value):
    seams = int(value)
    if seams <= 0:
        raise argparse.ArgumentTypeError(
            "The number of seams needs to be larger than 0")
    return seams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarver',
        description="Content-aware image shrinking by seam carving")
    parser.add_argument(
        'images',
        nargs='+',
        help='Images to carve')
    parser.add_argument(
        '-s', '--seams',
        type=_positive_int,
        required=True,
        help='Number of seams to remove')
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        '-v', '--vertical',
        dest='axis',
        action='store_const',
        const=Axis.VERTICAL,
        help='Remove vertical seams, reducing the width (default)')
    direction.add_argument(
        '-H', '--horizontal',
        dest='axis',
        action='store_const',
        const=Axis.HORIZONTAL,
        help='Remove horizontal seams, reducing the height')
    parser.set_defaults(axis=Axis.VERTICAL)
    parser.add_argument(
        '-e', '--energy',
        choices=[e.value for e in EnergyStrategy],
        default=EnergyStrategy.GRADIENT.value,
        help='Energy function (default: gradient)')
    parser.add_argument(
        '-l', '--log',
        action='count',
        default=0,
        help='Log progress; repeat (-ll) to also log every chosen seam')
    parser.add_argument(
        '--show',
        action='store_true',
        help='Display each carved image before writing it')
    return parser


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=logging.INFO if level > 0 else logging.WARNING,
        format='%(message)s',
    )


def carve_file(path: str, config: CarvingConfig, seams: int,
               log_level: int = 0, show: bool = False) -> str:
    """
    Carve one image file and write the result next to it.

    Returns:
        Path of the written image

    Raises:
        SeamCarvingError: the image is too small for the requested seams
        OSError: the file cannot be read or written
    """
    logger.info(f"Processing {path}")
    image = load_image(path)

    carver = SeamCarver(image, config, reporter=LoggingReporter(log_level, logger))
    available = carver.remaining()
    if seams > available:
        dimension = 'width' if config.axis is Axis.VERTICAL else 'height'
        raise SeamCarvingError(
            f"{path}: seams must be less than image {dimension} "
            f"({seams} requested, at most {available} possible)")

    carver.reduce(seams)

    if show:
        show_image(carver.image, title=path)

    out = output_path(path, seams)
    save_image(carver.image, out)
    logger.info(f"Saved: {out}")
    return out


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log)

    config = CarvingConfig(args.axis, args.energy)
    if args.log:
        logger.info("Performing seamcarving with options:")
        logger.info(f"\tdirection: {config.axis.value}")
        logger.info(f"\tseams: {args.seams}")
        logger.info(f"\tenergy: {config.energy.value}")

    status = 0
    for path in args.images:
        try:
            carve_file(path, config, args.seams, log_level=args.log, show=args.show)
        except (SeamCarvingError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            status = 1

    return status


