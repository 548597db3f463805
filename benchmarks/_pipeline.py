"""Aggregation and rendering of benchmark timings."""

import logging
import statistics
from typing import NamedTuple

import cytoolz as cz
from rich.table import Table

import pynub as nb

from ._registery import BENCHMARKS, CALLS_BY_RUN, Benchmark, Row, collect_raw_timings

logger = logging.getLogger(__name__)


class Stat(NamedTuple):
    """Median timing of one benchmark variant."""

    category: str
    name: str
    size: int
    runs: int
    median: float


def run_pipeline(category: str | None = None) -> nb.Result[list[Stat], str]:
    """Run the registered benchmarks, optionally only those of **category**."""
    selected = BENCHMARKS.select(
        lambda b: category is None or b.category.lower() == category.lower()
    )
    if selected.empty():
        return nb.Err(f"No benchmarks registered for category {category!r}!")
    logger.debug("running %d benchmarks", selected.len())
    return nb.Ok(_compute_all_stats(collect_raw_timings(selected)))


def _compute_all_stats(raw_rows: list[Row]) -> list[Stat]:
    """Compute median time per call for each benchmark variant."""
    groups = cz.itertoolz.groupby(lambda r: (r.category, r.name, r.size), raw_rows)
    return [
        Stat(
            category,
            name,
            size,
            len(rows),
            statistics.median(r.time for r in rows) / CALLS_BY_RUN,
        )
        for (category, name, size), rows in groups.items()
    ]


def to_table(stats: list[Stat]) -> Table:
    """Render stats as a table, fastest variant of each category and size highlighted."""
    best = {
        key: min(s.median for s in group)
        for key, group in cz.itertoolz.groupby(
            lambda s: (s.category, s.size), stats
        ).items()
    }
    table = Table(title="pynub benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs)"):
        table.add_column(column, justify="right" if column != "name" else "left")
    for s in sorted(stats, key=lambda s: (s.category, s.size, s.median)):
        style = "bold green" if s.median == best[(s.category, s.size)] else None
        table.add_row(
            s.category,
            s.name,
            str(s.size),
            str(s.runs),
            f"{s.median * 1e6:.2f}",
            style=style,
        )
    return table


def describe(benchmarks: nb.RefSlice[Benchmark]) -> Table:
    """List registered benchmarks without running them."""
    table = Table(title="registered benchmarks")
    table.add_column("category")
    table.add_column("name")
    table.add_column("sizes")
    for b in benchmarks:
        table.add_row(b.category, b.name, b.variants.map(lambda v: v.size).join(", ").inner())
    return table
