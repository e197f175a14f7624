"""Command-line interface for pathgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pathgraph.config import DEFAULT_CONFIG, GraphConfig, load_config
from pathgraph.display import render_graph, render_path
from pathgraph.lib.algorithms.closure import build_closure
from pathgraph.lib.graph import Graph
from pathgraph.lib.io import load_data, load_graph, load_table, save_graph
from pathgraph.lib.result import CapacityExceededError
from pathgraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _load_source(args: argparse.Namespace, config: GraphConfig) -> Graph:
    """Load the graph named by the source options, or exit with status 1.

    With both a binary pair and a table, the binary pair is tried first and
    the table is the fallback.
    """
    has_binary = args.vertices is not None and args.edges is not None
    if (args.vertices is None) != (args.edges is None):
        print("❌ ERROR: --vertices and --edges must be given together")
        sys.exit(1)

    if has_binary and args.table is not None:
        graph = load_data(args.table, args.vertices, args.edges, config)
    elif has_binary:
        graph = load_graph(args.vertices, args.edges, config)
    elif args.table is not None:
        graph = load_table(args.table, config=config)
    else:
        print("❌ ERROR: No graph source given (use --table or --vertices/--edges)")
        sys.exit(1)

    if graph is None:
        print("❌ ERROR: Could not load a graph from the given sources")
        sys.exit(1)

    logger.info(f"Loaded graph: {len(graph)} vertices, {graph.edge_count()} edges")
    return graph


def _save_pair(graph: Graph, vertices: Optional[Path], edges: Optional[Path]) -> None:
    if vertices is None and edges is None:
        return
    if vertices is None or edges is None:
        print("❌ ERROR: Both output files must be given to save a graph")
        sys.exit(1)
    save_graph(graph, vertices, edges)
    print(f"✅ Graph written to: {vertices}, {edges}")


def _show(args: argparse.Namespace, config: GraphConfig) -> None:
    graph = _load_source(args, config)
    print(render_graph(graph))


def _path(args: argparse.Namespace, config: GraphConfig) -> None:
    graph = _load_source(args, config)
    try:
        print(render_path(graph, args.origin, args.destination))
    except CapacityExceededError as e:
        print(f"❌ ERROR: {e}")
        sys.exit(1)


def _closure(args: argparse.Namespace, config: GraphConfig) -> None:
    graph = _load_source(args, config)
    closure = build_closure(graph)
    print(render_graph(closure))
    _save_pair(closure, args.save_vertices, args.save_edges)


def _convert(args: argparse.Namespace, config: GraphConfig) -> None:
    graph = _load_source(args, config)
    _save_pair(graph, args.out_vertices, args.out_edges)


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--table", "-t", type=Path, help="Tabular weight grid")
    parser.add_argument("--vertices", type=Path, help="Binary vertex file")
    parser.add_argument("--edges", type=Path, help="Binary edge file")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``,
            ``sys.argv`` is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathgraph",
        description="Inspect weighted graphs and their shortest paths.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Path to config YAML"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{show,path,closure,convert}",
        help="Available commands",
    )

    show_parser = subparsers.add_parser("show", help="Print a graph")
    _add_source_options(show_parser)

    path_parser = subparsers.add_parser("path", help="Print a shortest path")
    _add_source_options(path_parser)
    path_parser.add_argument("origin", type=int, help="Origin vertex id")
    path_parser.add_argument("destination", type=int, help="Destination vertex id")

    closure_parser = subparsers.add_parser(
        "closure", help="Print the all-pairs shortest-distance graph"
    )
    _add_source_options(closure_parser)
    closure_parser.add_argument("--save-vertices", type=Path, default=None)
    closure_parser.add_argument("--save-edges", type=Path, default=None)

    convert_parser = subparsers.add_parser(
        "convert", help="Save a graph as a binary vertex/edge pair"
    )
    _add_source_options(convert_parser)
    convert_parser.add_argument("--out-vertices", type=Path, required=True)
    convert_parser.add_argument("--out-edges", type=Path, required=True)

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    config = DEFAULT_CONFIG
    if args.config is not None:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"❌ ERROR: Config file not found: {args.config}")
            sys.exit(1)
        except ValueError as e:
            print(f"❌ ERROR: Invalid config: {e}")
            sys.exit(1)

    commands = {
        "show": _show,
        "path": _path,
        "closure": _closure,
        "convert": _convert,
    }
    commands[args.command](args, config)


if __name__ == "__main__":
    main()
