#!/usr/bin/env python3
"""Entry point for generating random graphs in DOT format.

Usage:
    python run_randgraph.py -v 10 -n 3 -p 0.5 --directed
    python run_randgraph.py --config config.json --output graph.dot
    python run_randgraph.py --config config.json --seed 7 --verbose
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from randgraph.config import DEFAULT_CONFIG, config_from_json, config_hash
from randgraph.config.generation import GenerationConfig
from randgraph.graph import Binomial, InvalidParameterError, RandGraph

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randgraph",
        description="Generate a random graph and write it using DOT",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to generation config JSON file",
    )
    parser.add_argument(
        "-v",
        "--vertices",
        type=int,
        default=None,
        help="Number of vertices",
    )
    parser.add_argument(
        "-n",
        "--trials",
        type=int,
        default=None,
        help="Number of trials per vertex",
    )
    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=None,
        help="Success probability of each trial",
    )
    parser.add_argument(
        "--loops",
        action="store_true",
        default=None,
        help="Allow self-loops",
    )
    parser.add_argument(
        "--multiedges",
        action="store_true",
        default=None,
        help="Allow multiple edges between the same tail and head",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        default=None,
        help="Generate a directed graph",
    )
    parser.add_argument(
        "--labels",
        type=str,
        default=None,
        help="Comma-separated vertex labels (cycled past the end)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: unpredictable)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output path (default: stdout)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> GenerationConfig:
    """Merge command-line overrides on top of the config file, if any.

    Raises:
        InvalidParameterError: If the merged parameters are out of range.
    """
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
    else:
        config = DEFAULT_CONFIG

    overrides: dict[str, Any] = {
        name: getattr(args, name)
        for name in (
            "vertices",
            "trials",
            "probability",
            "loops",
            "multiedges",
            "directed",
            "seed",
        )
        if getattr(args, name) is not None
    }
    if args.labels is not None:
        overrides["labels"] = tuple(
            s for s in args.labels.split(",") if s
        )
    return replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args)
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log.info(
        "Generating binomial graph: vertices=%d, trials=%d, probability=%s, "
        "seed=%s, config hash=%s",
        config.vertices,
        config.trials,
        config.probability,
        config.seed,
        config_hash(config, exclude_fields=["description"]),
    )

    graph = RandGraph(Binomial.from_config(config))

    if args.output is None:
        graph.write_dot(sys.stdout)
    else:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w") as f:
            graph.write_dot(f)
        log.info("Graph written to %s", output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
