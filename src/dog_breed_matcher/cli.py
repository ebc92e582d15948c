"""CLI for the dog breed matcher.

Commands:
- match: Rank catalog breeds for a lifestyle questionnaire
- traits: Show how one breed is read by the scorer (optionally with a score breakdown)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from . import __version__
from .application.matching import (
    BreedExplanation,
    MatchResult,
    explain_breed,
    load_breeds,
    run_match,
)
from .config import MatcherConfig
from .config_file import load_matcher_config_file
from .domain.profile import PROFILE_CHOICES
from .domain.traits import derive_traits
from .exceptions import MatcherError, ProfileValidationError
from .io_validation import parse_user_profile
from .protocols import FileSystem, HttpClient


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(
        self,
        *,
        config: MatcherConfig,
        build_http_client: bool,
    ) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    http_client: HttpClient | None


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: MatcherConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(
        self,
        *,
        build_http_client: bool,
        config: MatcherConfig | None = None,
    ) -> CliDependencies:
        """Return dependencies using the configured builder."""
        config_value = config or self.config
        return self.deps_builder(config=config_value, build_http_client=build_http_client)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the dog-match entry point.")


def _choices_help(field_name: str) -> str:
    return "One of: " + ", ".join(PROFILE_CHOICES[field_name])


FreeTimeOption = Annotated[
    str, typer.Option("--free-time", help=f"Free time for the dog. {_choices_help('free_time')}")
]
ActivityLevelOption = Annotated[
    str,
    typer.Option(
        "--activity-level", help=f"Your own activity. {_choices_help('activity_level')}"
    ),
]
NoiseToleranceOption = Annotated[
    str,
    typer.Option(
        "--noise-tolerance", help=f"Tolerance for barking. {_choices_help('noise_tolerance')}"
    ),
]
HousingOption = Annotated[
    str, typer.Option("--housing", help=f"Where the dog will live. {_choices_help('housing')}")
]
ExperienceOption = Annotated[
    str,
    typer.Option("--experience", help=f"Experience with dogs. {_choices_help('experience')}"),
]
AffectionNeedOption = Annotated[
    str,
    typer.Option(
        "--affection-need", help=f"How affectionate a dog you want. {_choices_help('affection_need')}"
    ),
]
BreedsFileOption = Annotated[
    Path | None,
    typer.Option(
        "--breeds-file",
        "-b",
        help="Local JSON breed catalog (skips TheDogAPI)",
    ),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="TOML config file (overrides environment values)",
    ),
]


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"dog-match {__version__}")
        raise typer.Exit()


def _fail(error: MatcherError) -> typer.Exit:
    rprint(f"[red]✗ {escape(str(error))}[/red]")
    return typer.Exit(code=1)


def _resolve_config(
    state: CliContext,
    *,
    config_path: Path | None,
    breeds_file: Path | None,
    min_score: int | None = None,
    limit: int | None = None,
) -> tuple[MatcherConfig, CliDependencies]:
    config = state.config
    deps = state.build_dependencies(build_http_client=False, config=config)
    if config_path is not None:
        config = config.with_file_overrides(load_matcher_config_file(path=config_path, fs=deps.fs))
    config = config.with_overrides(
        min_score=min_score,
        result_limit=limit,
        breeds_path=str(breeds_file) if breeds_file is not None else None,
    )
    if not config.breeds_path:
        deps = state.build_dependencies(build_http_client=True, config=config)
    return config, deps


def _print_match_table(result: MatchResult) -> None:
    if not result.results:
        rprint(
            f"[yellow]No breeds reached the minimum score "
            f"(checked {result.candidates:,} breeds).[/yellow]"
        )
        return

    table = Table(title=f"Top {len(result.results)} of {result.candidates:,} breeds")
    table.add_column("#", justify="right")
    table.add_column("Breed")
    table.add_column("Score", justify="right")
    table.add_column("Energy")
    table.add_column("Weight (kg)", justify="right")
    for position, item in enumerate(result.results, start=1):
        traits = derive_traits(item.breed)
        weight = traits.average_weight_kg
        table.add_row(
            str(position),
            escape(item.name or "?"),
            str(item.score),
            traits.energy,
            "?" if weight is None else f"{weight:.1f}",
        )
    rprint(table)


def _print_explanation(explanation: BreedExplanation) -> None:
    traits = explanation.traits
    name = explanation.breed.get("name")
    weight = traits.average_weight_kg
    rprint(f"[bold]{escape(str(name))}[/bold]")
    rprint(f"  Energy: {traits.energy}")
    rprint(f"  Affectionate: {traits.affectionate}")
    rprint(f"  Difficult for beginners: {traits.difficult_for_beginners}")
    rprint(f"  Vocalness: {traits.vocalness}")
    rprint(f"  Average weight (kg): {'unknown' if weight is None else f'{weight:.1f}'}")
    rprint(f"  Small-apartment suitable: {traits.apartment_suitable}")

    breakdown = explanation.breakdown
    if breakdown is None:
        return
    table = Table(title="Score breakdown")
    table.add_column("Dimension")
    table.add_column("Delta", justify="right")
    for dimension, delta in breakdown.contributions.items():
        table.add_row(dimension, f"{delta:+d}")
    table.add_row("[bold]total[/bold]", f"[bold]{breakdown.total:+d}[/bold]")
    rprint(table)


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Dog breed matcher: rank breeds against a lifestyle questionnaire",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                help="Show the installed version and exit",
                callback=_version_callback,
                is_eager=True,
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        try:
            config = MatcherConfig.from_env()
        except MatcherError as exc:
            raise _fail(exc) from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def match(
        ctx: typer.Context,
        free_time: FreeTimeOption,
        activity_level: ActivityLevelOption,
        noise_tolerance: NoiseToleranceOption,
        housing: HousingOption,
        experience: ExperienceOption,
        affection_need: AffectionNeedOption,
        breeds_file: BreedsFileOption = None,
        min_score: Annotated[
            int | None,
            typer.Option(
                "--min-score",
                help="Drop breeds scoring below this (default: MATCH_MIN_SCORE or 2)",
            ),
        ] = None,
        limit: Annotated[
            int | None,
            typer.Option(
                "--limit",
                "-n",
                min=1,
                help="Maximum number of breeds to return (default: MATCH_RESULT_LIMIT or 10)",
            ),
        ] = None,
        config_path: ConfigFileOption = None,
        as_json: Annotated[
            bool,
            typer.Option("--json", help="Print the response document as JSON"),
        ] = False,
        use_cache: Annotated[
            bool,
            typer.Option("--cache/--no-cache", help="Use the cached catalog response"),
        ] = True,
    ) -> None:
        """Rank catalog breeds for your answers to the questionnaire."""
        state = _get_context(ctx)
        answers = {
            "free_time": free_time,
            "activity_level": activity_level,
            "noise_tolerance": noise_tolerance,
            "housing": housing,
            "experience": experience,
            "affection_need": affection_need,
        }
        try:
            profile = parse_user_profile(answers)
            config, deps = _resolve_config(
                state,
                config_path=config_path,
                breeds_file=breeds_file,
                min_score=min_score,
                limit=limit,
            )
            result = run_match(
                profile=profile,
                config=config,
                http_client=deps.http_client,
                fs=deps.fs,
                use_cache=use_cache,
            )
        except ProfileValidationError as exc:
            raise typer.BadParameter(str(exc)) from exc
        except MatcherError as exc:
            raise _fail(exc) from exc

        if as_json:
            typer.echo(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))
            return
        _print_match_table(result)

    @app.command()
    def traits(
        ctx: typer.Context,
        name: Annotated[str, typer.Argument(help="Breed name, e.g. 'Border Collie'")],
        breeds_file: BreedsFileOption = None,
        config_path: ConfigFileOption = None,
        free_time: Annotated[str | None, typer.Option("--free-time")] = None,
        activity_level: Annotated[str | None, typer.Option("--activity-level")] = None,
        noise_tolerance: Annotated[str | None, typer.Option("--noise-tolerance")] = None,
        housing: Annotated[str | None, typer.Option("--housing")] = None,
        experience: Annotated[str | None, typer.Option("--experience")] = None,
        affection_need: Annotated[str | None, typer.Option("--affection-need")] = None,
    ) -> None:
        """Show the derived traits of a breed.

        Pass all six questionnaire options to also see the per-dimension score.
        """
        state = _get_context(ctx)
        answers = {
            "free_time": free_time,
            "activity_level": activity_level,
            "noise_tolerance": noise_tolerance,
            "housing": housing,
            "experience": experience,
            "affection_need": affection_need,
        }
        given = {key: value for key, value in answers.items() if value is not None}
        try:
            profile = parse_user_profile(answers) if given else None
            config, deps = _resolve_config(
                state,
                config_path=config_path,
                breeds_file=breeds_file,
            )
            breeds = load_breeds(config=config, http_client=deps.http_client, fs=deps.fs)
            explanation = explain_breed(breed_name=name, breeds=breeds, profile=profile)
        except ProfileValidationError as exc:
            raise typer.BadParameter(str(exc)) from exc
        except MatcherError as exc:
            raise _fail(exc) from exc

        _print_explanation(explanation)

    _ = (main, match, traits)

    return app
