"""pattern-demos CLI: list, show and run the demos (list/show/run/run-all)."""

from __future__ import annotations

import json
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import demos  # noqa: F401  (registers every demo)
from core.logging import setup_logging
from core.narration import narrate
from core.registry import DemoDefinition, registry
from patterns.domain_config import DemoConfig

app = typer.Typer(help="Run design pattern demos: without the pattern, then with it.")


def _console() -> Console:
    return Console()


@app.callback()
def init(
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="Logging level (default: LOG_LEVEL or WARNING)")
    ] = None,
) -> None:
    setup_logging(log_level)


def _fail(message: str) -> NoReturn:
    _console().print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


def _resolve_variants(pattern: str, variant: str) -> list[str]:
    available = registry.variants(pattern)
    if not available:
        _fail(f"Unknown pattern: {pattern}. Choose from: {', '.join(registry.patterns())}")
    if variant == "both":
        return available
    if variant not in available:
        _fail(f"{pattern} has no '{variant}' variant. Available: {', '.join(available)}")
    return [variant]


def _collect_inputs(
    definition: DemoDefinition,
    provided: dict[str, Optional[str]],
    interactive: bool,
    config: DemoConfig,
) -> dict[str, str]:
    """Fill the demo's inputs from options, prompting for the missing ones."""
    inputs: dict[str, str] = {}
    for name, allowed in definition.inputs.items():
        value = provided.get(name)
        if value is None and interactive:
            default = {"channel": config.default_channel, "region": config.default_region}.get(name)
            if default not in allowed:
                default = allowed[0] if allowed else None
            value = typer.prompt(f"Enter {name} ({'/'.join(allowed)})", default=default)
        if value is not None:
            inputs[name] = value
    return inputs


def _run_one(definition: DemoDefinition, config: DemoConfig, inputs: dict[str, str]) -> None:
    _console().print(Panel.fit(definition.title, title=definition.key, border_style="cyan"))
    try:
        registry.run(definition.pattern, definition.variant, config=config, **inputs)
    except (ValueError, RuntimeError) as exc:
        _fail(str(exc))
    narrate("")


@app.command("list")
def list_cmd(
    pattern: Annotated[Optional[str], typer.Option(help="Only this pattern")] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Emit JSON list")] = False,
) -> None:
    demos_found = registry.list_demos(pattern)
    if json_out:
        typer.echo(json.dumps([d.model_dump() for d in demos_found], indent=2))
        return
    cons = _console()
    if not demos_found:
        cons.print("[yellow]No demos found[/yellow]")
        return
    table = Table(title="Pattern demos")
    for col in ("Pattern", "Variant", "Title", "Inputs"):
        table.add_column(col)
    for d in demos_found:
        table.add_row(d.pattern, d.variant, d.title, ", ".join(d.inputs) or "-")
    cons.print(table)


@app.command("show")
def show_cmd(pattern: str) -> None:
    demos_found = registry.list_demos(pattern)
    if not demos_found:
        _fail(f"Unknown pattern: {pattern}")
    cons = _console()
    for d in demos_found:
        lines = [f"[bold]{d.title}[/bold]", d.summary]
        if d.roles:
            lines.append("")
            lines.extend(f"- {role}" for role in d.roles)
        if d.inputs:
            lines.append("")
            lines.extend(f"input {name}: {', '.join(values)}" for name, values in d.inputs.items())
        cons.print(Panel("\n".join(lines), title=d.key, border_style="blue"))


@app.command("run")
def run_cmd(
    pattern: str,
    variant: Annotated[str, typer.Option(help="with | without | both")] = "both",
    channel: Annotated[Optional[str], typer.Option(help="OTP channel for factory demos")] = None,
    region: Annotated[Optional[str], typer.Option(help="Region for the abstract factory demo")] = None,
    interactive: Annotated[
        bool, typer.Option("--interactive/--no-interactive", help="Prompt for missing inputs")
    ] = True,
) -> None:
    config = DemoConfig.from_env()
    provided = {"channel": channel, "region": region}
    for v in _resolve_variants(pattern, variant):
        definition = registry.get(pattern, v)
        inputs = _collect_inputs(definition, provided, interactive, config)
        _run_one(definition, config, inputs)


@app.command("run-all")
def run_all_cmd() -> None:
    """Run every demo with default inputs."""
    config = DemoConfig.from_env()
    for definition in registry.list_demos():
        _run_one(definition, config, {})


if __name__ == "__main__":  # pragma: no cover
    app()
