import math
from typing import Optional, Union

from rich.console import Console
from rich.table import Table

from .schemes import STAT_FIELDS, CovarianceStats, Stats

console = Console()


def _fmt(v: float) -> str:
    return "-" if math.isnan(v) else f"{v:.6g}"


def stats_table(stats: Stats, title: Optional[str] = None) -> Table:
    """Single-column table of a Stats record."""
    t = Table(title=title)
    t.add_column("stat")
    t.add_column("value", justify="right")
    t.add_row("count", str(stats.count))
    for name in STAT_FIELDS:
        t.add_row(name, _fmt(getattr(stats, name)))
    return t


def covariance_table(stats: CovarianceStats, title: Optional[str] = None) -> Table:
    """Side-by-side x/y table with the covariance as the last row."""
    t = Table(title=title)
    t.add_column("stat")
    t.add_column("x", justify="right")
    t.add_column("y", justify="right")
    t.add_row("count", str(stats.x.count), str(stats.y.count))
    for name in STAT_FIELDS:
        t.add_row(name, _fmt(getattr(stats.x, name)), _fmt(getattr(stats.y, name)))
    t.add_row("[bold]covariance[/bold]", _fmt(stats.covariance), "")
    return t


def print_stats(
    stats: Union[Stats, CovarianceStats],
    title: Optional[str] = None,
    out: Optional[Console] = None,
) -> None:
    out = out or console
    if isinstance(stats, CovarianceStats):
        out.print(covariance_table(stats, title))
    else:
        out.print(stats_table(stats, title))
