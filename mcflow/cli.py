"""Command-line interface for mcflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from mcflow.algorithms.min_cost_flow import cycle_canceling
from mcflow.algorithms.residual import extract_optimal_graph, flow_value
from mcflow.algorithms.types import CycleSearch
from mcflow.config import SolverConfig
from mcflow.graph.flow_graph import FlowGraph
from mcflow.loader import load_graph
from mcflow.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = []
    lines.append(format_row(headers))
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _anti_parallel_pairs(graph: FlowGraph) -> List[tuple[int, int]]:
    """Return ``(u, v)`` with ``u < v`` for every pair joined in both directions."""
    return [
        (edge.source, edge.sink)
        for edge in graph.iter_edges()
        if edge.source < edge.sink and graph.has_edge(edge.sink, edge.source)
    ]


def _results_to_dict(
    graph: FlowGraph,
    flow_graph: FlowGraph,
    source: int,
    sink: int,
    max_flow: int,
    min_cost: int,
) -> Dict[str, Any]:
    """Build the JSON-serializable solve report."""
    return {
        "source": source,
        "sink": sink,
        "max_flow": max_flow,
        "min_cost": min_cost,
        "edges": [
            {
                "source": edge.source,
                "sink": edge.sink,
                "capacity": edge.capacity,
                "cost": edge.cost,
                "flow": flow_graph.get_edge(edge.source, edge.sink).capacity,
            }
            for edge in graph.iter_edges()
        ],
    }


def _solve_graph(
    path: Path,
    source: Optional[int],
    sink: Optional[int],
    cycle_search: str,
    results_path: Optional[Path],
    stdout: bool,
) -> None:
    """Load a graph file, solve minimum-cost maximum flow and report it.

    Args:
        path: Graph file (JSON or YAML).
        source: Source node; node 0 when None.
        sink: Sink node; the last node when None.
        cycle_search: Negative-cycle search scope name ("graph" or "source").
        results_path: Optional JSON file to write the report to.
        stdout: Whether to print the JSON report to stdout.
    """
    logger.info(f"Solving graph: {path}")
    _start_time = perf_counter()

    try:
        graph = load_graph(path)
        config = SolverConfig(
            source=0 if source is None else source,
            sink=sink,
            cycle_search=CycleSearch.from_string(cycle_search),
        )
        src, dst = config.resolve_terminals(graph.num_nodes)

        residual_graph, min_cost = cycle_canceling(graph, config=config)
        flow_graph = extract_optimal_graph(residual_graph, graph)
        max_flow = flow_value(flow_graph, src)
        results = _results_to_dict(graph, flow_graph, src, dst, max_flow, min_cost)

        print(f"Minimum-cost flow {src} -> {dst}")
        print(f"  Max flow: {max_flow}")
        print(f"  Minimum cost: {min_cost}")
        table = _format_table(
            ["Source", "Sink", "Flow", "Capacity", "Cost"],
            [
                [
                    str(row["source"]),
                    str(row["sink"]),
                    str(row["flow"]),
                    str(row["capacity"]),
                    str(row["cost"]),
                ]
                for row in results["edges"]
            ],
        )
        if table:
            print(table)

        json_str = json.dumps(results, indent=2)
        if results_path is not None:
            results_path.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Writing results to: {results_path}")
            results_path.write_text(json_str)
            print(f"Results written to: {results_path}")
        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(f"Solve completed successfully in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_graph(path: Path) -> None:
    """Load a graph file and print a structural summary.

    Args:
        path: Graph file (JSON or YAML).
    """
    logger.info(f"Inspecting graph: {path}")

    try:
        graph = load_graph(path)
        edges = list(graph.iter_edges())
        pairs = _anti_parallel_pairs(graph)

        print("GRAPH SUMMARY")
        print(f"  Nodes: {graph.num_nodes}")
        print(f"  Edges: {len(edges)}")
        print(f"  Total capacity: {sum(edge.capacity for edge in edges)}")
        print(f"  Zero-capacity edges: {sum(1 for e in edges if e.capacity == 0)}")
        print(f"  Self-loops: {sum(1 for e in edges if e.source == e.sink)}")
        print(f"  Anti-parallel pairs: {len(pairs)}")
        for u, v in pairs:
            print(f"    {u} <-> {v}")
        if graph.num_nodes:
            print(f"  Default terminals: 0 -> {graph.num_nodes - 1}")

    except FileNotFoundError:
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect graph: {e}")
        print("ERROR: Failed to inspect graph")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``mcflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="mcflow",
        description="Solve minimum-cost maximum flow problems by cycle canceling.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        "solve", help="Compute a minimum-cost maximum flow"
    )
    solve_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")
    solve_parser.add_argument(
        "--source", type=int, default=None, help="Source node (default: 0)"
    )
    solve_parser.add_argument(
        "--sink", type=int, default=None, help="Sink node (default: last node)"
    )
    solve_parser.add_argument(
        "--cycle-search",
        choices=[member.name.lower() for member in CycleSearch],
        default=CycleSearch.GRAPH.name.lower(),
        help="Where to search for negative cycles (default: graph)",
    )
    solve_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to this JSON file",
    )
    solve_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results JSON to stdout",
    )

    # Inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a graph file"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph JSON/YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Configure logging based on arguments
    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve_graph(
            path=args.graph,
            source=args.source,
            sink=args.sink,
            cycle_search=args.cycle_search,
            results_path=args.results,
            stdout=args.stdout,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
