"""Tests for `mcflow.config` focusing on behavior and correctness."""

import pytest

from mcflow.algorithms.types import CycleSearch
from mcflow.config import SOLVER_CONFIG, SolverConfig


def test_default_config_values() -> None:
    """Defaults pick node 0 as source, the last node as sink, graph-wide search."""
    config = SolverConfig()
    assert config.source == 0
    assert config.sink is None
    assert config.cycle_search == CycleSearch.GRAPH
    assert config.progress_log_interval == 100


def test_global_config_matches_defaults() -> None:
    assert SOLVER_CONFIG == SolverConfig()


def test_resolve_terminals_default_sink() -> None:
    """Sink defaults to the last node id."""
    config = SolverConfig()
    assert config.resolve_terminals(4) == (0, 3)
    assert config.resolve_terminals(1) == (0, 0)


def test_resolve_terminals_explicit() -> None:
    config = SolverConfig(source=2, sink=1)
    assert config.resolve_terminals(4) == (2, 1)


@pytest.mark.parametrize("num_nodes", [0, -1])
def test_resolve_terminals_empty_graph(num_nodes: int) -> None:
    with pytest.raises(ValueError, match="without nodes"):
        SolverConfig().resolve_terminals(num_nodes)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("graph", CycleSearch.GRAPH),
        ("GRAPH", CycleSearch.GRAPH),
        ("Source", CycleSearch.SOURCE),
    ],
)
def test_cycle_search_from_string(value: str, expected: CycleSearch) -> None:
    assert CycleSearch.from_string(value) == expected


def test_cycle_search_from_string_invalid() -> None:
    with pytest.raises(ValueError, match="Valid values are: SOURCE, GRAPH"):
        CycleSearch.from_string("everywhere")
