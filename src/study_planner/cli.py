"""CLI entry point for the study planner."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .catalog import Catalog, load_catalog
from .config import ConfigLoader, PlannerConfig
from .display import display_semester, offered_text, prereq_text, unit_title
from .exceptions import PlannerError
from .exporters import export_plan_excel, export_plan_json, group_by_semester, load_study_plan
from .models import StudyPlan
from .planner import BoundsOptimizer, PrerequisiteChecker, SchedulingWizard, last_semester
from .semesters import parse_semester

app = typer.Typer(
    name="study-planner",
    help="Check and shorten university study plans",
    add_completion=False,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_inputs(catalog_file: Path, plan_file: Path) -> tuple[Catalog, StudyPlan]:
    for path in (catalog_file, plan_file):
        if not path.exists():
            console.print(f"[bold red]Error:[/bold red] File not found: {path}")
            raise typer.Exit(1)

    with console.status("[bold green]Loading catalog and plan..."):
        catalog = load_catalog(catalog_file)
        plan = load_study_plan(plan_file)

    unknown = [u.code for u in plan if u.code not in catalog]
    if unknown:
        console.print(
            f"[bold red]Error:[/bold red] Units not in catalog: {', '.join(unknown)}"
        )
        raise typer.Exit(1)
    return catalog, plan


def _load_config(config_dir: Optional[Path], current_semester: Optional[str]) -> PlannerConfig:
    config = ConfigLoader(config_dir).load() if config_dir else PlannerConfig()
    if current_semester:
        config = PlannerConfig(
            current_semester=parse_semester(current_semester),
            max_units_per_semester=config.max_units_per_semester,
        )
    return config


def _plan_table(catalog: Catalog, plan: StudyPlan, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Semester", style="cyan")
    table.add_column("Units", style="green")
    for semester, units in group_by_semester(plan).items():
        table.add_row(
            display_semester(semester),
            "\n".join(unit_title(catalog, u.code) for u in units),
        )
    return table


@app.command()
def improve(
    catalog_file: Annotated[Path, typer.Argument(help="Unit catalog (.json, .csv or .xlsx)")],
    plan_file: Annotated[Path, typer.Argument(help="Study plan JSON file")],
    current_semester: Annotated[
        Optional[str],
        typer.Option("--current-semester", "-c", help="First semester to plan from, e.g. 2021/1"),
    ] = None,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config-dir", help="Directory containing planner.json"),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Stop after this many improvements"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Write the best plan to this JSON file"),
    ] = None,
    excel: Annotated[
        Optional[Path],
        typer.Option("--excel", help="Write the best plan to this Excel file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Search for study plans that finish earlier than the given one."""
    _setup_logging(verbose)
    try:
        catalog, plan = _load_inputs(catalog_file, plan_file)
        config = _load_config(config_dir, current_semester)

        if not plan:
            console.print("[bold yellow]Warning:[/bold yellow] Study plan is empty")
            raise typer.Exit(1)

        wizard = SchedulingWizard(catalog, config)
        console.print(f"\n[bold]Improving plan:[/bold] {plan_file.name}")
        console.print(f"  Units: {len(plan)}")
        console.print(f"  Current finish: {display_semester(last_semester(plan))}")
        console.print(f"  Best achievable: {display_semester(wizard.best_achievable(plan))}")

        best = None
        count = 0
        with console.status("[bold green]Searching for shorter plans..."):
            for improved in wizard.try_to_improve_schedule(plan):
                count += 1
                best = improved
                console.print(
                    f"  [green]•[/green] Improvement {count}: finishes "
                    f"{display_semester(last_semester(improved))}"
                )
                if limit is not None and count >= limit:
                    break

        if best is None:
            console.print("\n[bold yellow]No shorter plan found.[/bold yellow]")
            return

        console.print(_plan_table(catalog, best, "Best plan found"))

        if output:
            output_path = output if output.suffix == ".json" else output.with_suffix(".json")
            export_plan_json(best, output_path)
            console.print(f"\n[bold green]✓[/bold green] Plan exported to: {output_path}")
        if excel:
            excel_path = export_plan_excel(best, catalog, excel)
            console.print(f"\n[bold green]✓[/bold green] Excel plan exported to: {excel_path}")
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def check(
    catalog_file: Annotated[Path, typer.Argument(help="Unit catalog (.json, .csv or .xlsx)")],
    plan_file: Annotated[Path, typer.Argument(help="Study plan JSON file")],
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show prerequisites and offerings"),
    ] = False,
) -> None:
    """Check that every unit in a study plan is legally placed."""
    _setup_logging(False)
    try:
        catalog, plan = _load_inputs(catalog_file, plan_file)
        checker = PrerequisiteChecker(catalog)

        table = Table(title=f"Legality of {plan_file.name}")
        table.add_column("Semester", style="cyan")
        table.add_column("Unit", style="blue", max_width=50)
        table.add_column("Legal")
        if verbose:
            table.add_column("Prerequisites", style="magenta")
            table.add_column("Offered", style="yellow")

        for unit in sorted(plan, key=lambda u: (u.semester, u.code)):
            legal = checker.is_legal_in(unit.code, unit.semester, plan)
            row = [
                display_semester(unit.semester),
                unit_title(catalog, unit.code),
                "[green]yes[/green]" if legal else "[red]no[/red]",
            ]
            if verbose:
                row += [prereq_text(catalog, unit.code), offered_text(catalog, unit.code)]
            table.add_row(*row)
        console.print(table)

        if checker.is_legal_plan(plan):
            console.print("[bold green]✓ Plan is legal[/bold green]")
        else:
            console.print("[bold red]✗ Plan has illegal placements[/bold red]")
            raise typer.Exit(1)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def bounds(
    catalog_file: Annotated[Path, typer.Argument(help="Unit catalog (.json, .csv or .xlsx)")],
    plan_file: Annotated[Path, typer.Argument(help="Study plan JSON file")],
    last: Annotated[
        Optional[str],
        typer.Option("--last", "-l", help="Latest allowed semester (default: plan's finish)"),
    ] = None,
    current_semester: Annotated[
        Optional[str],
        typer.Option("--current-semester", "-c", help="First semester to plan from, e.g. 2021/1"),
    ] = None,
) -> None:
    """Show the semesters each unit of a plan could be placed in."""
    _setup_logging(False)
    try:
        catalog, plan = _load_inputs(catalog_file, plan_file)
        config = _load_config(None, current_semester)
        if not plan:
            console.print("[bold yellow]Warning:[/bold yellow] Study plan is empty")
            raise typer.Exit(1)
        last_allowed = parse_semester(last) if last else last_semester(plan)

        optimizer = BoundsOptimizer(PrerequisiteChecker(catalog, config.max_units_per_semester))
        bound_plan = optimizer.bound_units_in_plan(plan, config.current_semester, last_allowed)

        table = Table(
            title=f"Possible semesters {display_semester(config.current_semester)}"
            f" - {display_semester(last_allowed)}"
        )
        table.add_column("Unit", style="cyan", max_width=50)
        table.add_column("Possible semesters", style="green")
        for unit in bound_plan:
            semesters = ", ".join(display_semester(s) for s in unit.possible_semesters)
            table.add_row(unit_title(catalog, unit.code), semesters or "[red]none[/red]")
        console.print(table)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
