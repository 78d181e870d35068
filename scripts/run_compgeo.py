#!/usr/bin/env python3
"""
Command-line driver for the geometry kernel.

Runs a Voronoi or Bezier computation on a background worker and prints the
result as JSON.

    python scripts/run_compgeo.py voronoi --width 100 --height 100 10,10 80,20 40,70
    python scripts/run_compgeo.py bezier 0,0 5,10 10,0 --max-point-difference 0.5
"""

import argparse
import json
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import compgeo


def parse_point(text):
    """Parse an ``x,y`` argument."""
    try:
        x, y = (float(v) for v in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected x,y but got '{text}'")
    return compgeo.geometry.Point(x, y)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Delaunay/Voronoi and Bezier computations'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Print progress while computing'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: COMPGEO_LOG_LEVEL or INFO)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the JSON result to this file instead of stdout'
    )
    sub = parser.add_subparsers(dest='command', required=True)

    voronoi = sub.add_parser('voronoi', help='Voronoi cells clipped to a canvas')
    voronoi.add_argument('points', nargs='+', type=parse_point, help='Sites as x,y')
    voronoi.add_argument('--width', type=float, required=True, help='Canvas width')
    voronoi.add_argument('--height', type=float, required=True, help='Canvas height')

    bezier = sub.add_parser('bezier', help='Adaptive Bezier polyline')
    bezier.add_argument('points', nargs='+', type=parse_point, help='Control points as x,y')
    bezier.add_argument(
        '--max-point-difference',
        type=float,
        default=None,
        help='Max distance between consecutive points (default: 0.5)'
    )
    return parser


def main(argv=None):
    """Main entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)
    compgeo.config.configure_logging(level=args.log_level)

    if args.command == 'voronoi':
        job = compgeo.utils.voronoi_job(args.points, args.width, args.height)
    else:
        job = compgeo.utils.bezier_job(args.points, args.max_point_difference)

    progress_action = None
    if args.progress:
        def progress_action(_amount):
            compgeo.utils.print_progress(worker.progress, args.command)

    worker = compgeo.utils.KernelWorker(job, progress_action=progress_action,
                                        description=args.command)
    worker.start()
    outcome = worker.result()

    if outcome.status is not compgeo.utils.TaskStatus.COMPLETED:
        print(f"{args.command} {outcome.status.value}: {outcome.error}", file=sys.stderr)
        return 1

    if args.command == 'voronoi':
        payload = [
            {'site': list(site), 'cell': [list(p) for p in cell]}
            for site, cell in outcome.value.items()
        ]
    else:
        payload = [list(p) for p in outcome.value]

    text = json.dumps(payload, indent=2)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"Result saved to: {args.output}")
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
