"""mneme CLI: local inspection of the FSRS scheduling engine."""

import json
import logging
import sys
from dataclasses import replace
from datetime import datetime
from typing import Annotated, NoReturn

import typer

from mneme.application.config import MnemeConfig, resolve_config
from mneme.application.factory import get_scheduling_engine
from mneme.consts import VERSION
from mneme.domain.scheduling.errors import SchedulingError
from mneme.domain.scheduling.models import MemoryCard, new_card
from mneme.domain.scheduling.weights import get_weight_set
from mneme.infrastructure.adapters.clock import FixedClock

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="mneme: FSRS-4.5 spaced-repetition scheduler.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Manage mneme configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _log_level(verbose: int) -> int:
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
):
    """Global settings for mneme."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    baseline = verbose if verbose else _config().verbose
    logging.getLogger("mneme").setLevel(_log_level(baseline))


def _config() -> MnemeConfig:
    try:
        return resolve_config()
    except ValueError as e:
        _fail(f"Invalid configuration: {e}")


def _engine(now: datetime | None = None):
    config = _config()
    clock = FixedClock(now) if now else None
    return get_scheduling_engine(config, clock=clock)


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg="red", err=True)
    raise typer.Exit(2)


# ---------------------------------------------------------------------------
# Root commands
# ---------------------------------------------------------------------------


@app.command("new-card")
def new_card_cmd():
    """Print a card in the NEW state as JSON."""
    typer.echo(json.dumps(new_card().to_dict(), indent=2))


@app.command()
def review(
    quality: Annotated[int, typer.Argument(help="1=Again, 2=Hard, 3=Good, 4=Easy.")],
    stability: Annotated[float, typer.Option(help="Current stability (days). 0 = never reviewed.")] = 0.0,
    difficulty: Annotated[float, typer.Option(help="Current difficulty (1-10).")] = 5.0,
    elapsed_days: Annotated[float, typer.Option(help="Days since the last review.")] = 0.0,
    scheduled_days: Annotated[int, typer.Option(help="Interval planned at the last review.")] = 0,
    reps: Annotated[int, typer.Option(help="Successful review count.")] = 0,
    lapses: Annotated[int, typer.Option(help="Lapse count.")] = 0,
    now: Annotated[
        datetime | None, typer.Option(help="Review moment (ISO-8601). Defaults to the system clock.")
    ] = None,
):
    """[bold green]Review[/bold green] a card and print the scheduling result as JSON."""
    card = MemoryCard(
        stability=stability,
        difficulty=difficulty,
        elapsed_days=elapsed_days,
        scheduled_days=scheduled_days,
        reps=reps,
        lapses=lapses,
    )
    try:
        result = _engine(now).review(card, quality)
    except SchedulingError as e:
        _fail(str(e))

    typer.echo(json.dumps(result.to_dict(), indent=2))


@app.command()
def retrievability(
    elapsed_days: Annotated[float, typer.Argument(help="Days since the last review.")],
    stability: Annotated[float, typer.Argument(help="Memory stability (days).")],
):
    """Print the probability of recall after ELAPSED_DAYS for STABILITY."""
    r = _engine().retrievability(elapsed_days, stability)
    typer.echo(f"{r:.4f}")


@app.command()
def simulate(
    ratings: Annotated[list[int], typer.Argument(help="Ratings to apply in order (1-4).")],
    start: Annotated[
        datetime | None, typer.Option(help="Moment of the first review (ISO-8601).")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Replay RATINGS on a new card, reviewing each time exactly on the due day."""
    engine = _engine()
    card = new_card()
    moment = start or datetime.now().astimezone()
    steps = []

    for i, quality in enumerate(ratings, start=1):
        try:
            result = engine.review(card, quality, now=moment)
        except SchedulingError as e:
            _fail(f"Step {i}: {e}")

        steps.append({"step": i, "quality": quality, **result.to_dict()})
        # On-time review: the next one happens on the due date.
        card = replace(result.card, elapsed_days=result.scheduled_days)
        moment = result.due_date

    if json_output:
        typer.echo(json.dumps(steps, indent=2))
        return

    for s in steps:
        typer.echo(
            f"[{s['step']}] q={s['quality']}  S={s['stability']:.2f}  D={s['difficulty']:.2f}"
            f"  ivl={s['scheduled_days']}d  reps={s['reps']}  lapses={s['lapses']}"
            f"  due={s['due_date'][:10]}"
        )


@app.command()
def weights():
    """Show the active weight set."""
    config = _config()
    ws = get_weight_set(config.weights_version)
    typer.echo(json.dumps({"version": ws.version, "w": list(ws.w)}, indent=2))


@app.command()
def version():
    """Print the mneme version."""
    typer.echo(VERSION)


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = _config()
    typer.echo(json.dumps(config.model_dump(), indent=2))
