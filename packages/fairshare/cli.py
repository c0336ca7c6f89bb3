# ruff: noqa: I001
"""CLI for the ``fairshare`` package.

Command handlers (``cmd_charts``, ``cmd_normalize``) hold the behavior and
return an exit code; the Typer commands below only resolve options and
environment. ``.env`` in the working directory is loaded by the root callback
without overriding variables that are already set.
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger

_logger = get_logger("fairshare.cli")

OUTPUT_FORMATS = ("table", "json")


def _resolve_window(window: int | None) -> int:
    """Resolve the monthly window from the option or ``FAIRSHARE_MONTH_WINDOW``.

    Invalid or non-positive environment values fall back to the default.
    """

    from .aggregate import DEFAULT_MONTH_WINDOW

    if window is not None:
        return window
    env_val = os.getenv("FAIRSHARE_MONTH_WINDOW")
    try:
        parsed = int(env_val) if env_val else None
    except ValueError:
        parsed = None
    if parsed is not None and parsed > 0:
        return parsed
    if env_val:
        _logger.warning("Ignoring invalid FAIRSHARE_MONTH_WINDOW=%r", env_val)
    return DEFAULT_MONTH_WINDOW


def cmd_charts(store_path: str | None, *, window: int, output_format: str = "table") -> int:
    """Print the monthly, category and share views for the store at ``store_path``.

    ``table`` output prints three text tables (the share table with
    percentages); ``json`` prints the chart payload document. Returns ``0`` on
    success and ``2`` for an unknown format.
    """

    from .api import chart_payload_json, load_chart_data
    from .formatting import render_table

    if output_format not in OUTPUT_FORMATS:
        print(
            f"Error: unknown format {output_format!r}; expected one of: "
            + ", ".join(OUTPUT_FORMATS),
            file=sys.stderr,
        )
        return 2

    data = load_chart_data(store_path, window=window)

    if output_format == "json":
        print(chart_payload_json(data))
        return 0

    print(render_table(data.monthly, title="Monthly spend"))
    print()
    print(render_table(data.category, title="Spend by category"))
    print()
    print(render_table(data.share, title="Share by person", with_percent=True))
    return 0


def cmd_normalize(store_path: str | None) -> int:
    """Print each normalized expense as one JSON object per line."""

    from .normalizers import normalize_expenses
    from .store import load_raw_expenses

    for expense in normalize_expenses(load_raw_expenses(store_path)):
        print(json.dumps(asdict(expense), ensure_ascii=False))
    return 0


# ---- Typer-based console interface -------------------------------------------

# Module-level option objects keep calls out of parameter defaults (ruff B008).
STORE_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # default comes from the signature
    "--store",
    help="Path to the JSON expense store (defaults to FAIRSHARE_STORE_PATH or ./fairshare_expenses.json).",
    dir_okay=False,
    file_okay=True,
    exists=False,  # a missing store is valid: charts fall back to demo data
)

WINDOW_OPTION: OptionInfo = typer.Option(
    ...,
    "--window",
    help="Number of most recent months in the monthly view (default 9 or FAIRSHARE_MONTH_WINDOW).",
)


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Aggregate shared expenses into monthly, category and per-person chart data.",
)


@app.command("charts")
def charts_cmd(
    store: Annotated[Path | None, STORE_PATH_OPTION] = None,
    window: Annotated[int | None, WINDOW_OPTION] = None,
    *,
    output_format: str = typer.Option("table", "--format", help="Output format: table or json."),
) -> None:
    """Print the three chart views."""

    if window is not None and window < 1:
        raise typer.BadParameter("must be a positive integer", param_hint="--window")
    code = cmd_charts(
        str(store) if store is not None else None,
        window=_resolve_window(window),
        output_format=output_format.strip().lower(),
    )
    raise typer.Exit(code)


@app.command("normalize")
def normalize_cmd(
    store: Annotated[Path | None, STORE_PATH_OPTION] = None,
) -> None:
    """Print the normalized expense records as JSON lines."""

    code = cmd_normalize(str(store) if store is not None else None)
    raise typer.Exit(code)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (overrides FAIRSHARE_LOG_LEVEL)."
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m fairshare.cli`
    main()
