import json
from pathlib import Path
from typing import NoReturn, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from agent_studio.config import DEFAULT_CONFIG_PATH, DEFAULT_STUDIO_DIR, StudioConfig
from agent_studio.config_provider import ConfigProvider
from agent_studio.domain import AgentConfig, TaxonomyField, ToolDraft, ToolMode
from agent_studio.domain.exceptions import AgentStudioError
from agent_studio.domain.presets import TOOL_TEMPLATES, suggestions_for
from agent_studio.engine.builder_session import BuilderSession
from agent_studio.engine.manifest_compiler import manifest_json_schema
from agent_studio.infra.definition_store import DefinitionStore
from agent_studio.infra.logging_setup import setup_logging

app = typer.Typer(help="Design agent definitions and export prompts and manifests.")
console = Console()
AGENT_HELP = (
    "Agent id (stored as "
    f"{DEFAULT_STUDIO_DIR.as_posix()}/agents/<agent>.agent.json)."
)


def _fail(error: Exception) -> NoReturn:
    """Prints an error and exits with a failure code."""

    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1)


def _open_session(
    config: StudioConfig, agent: str
) -> Tuple[DefinitionStore, BuilderSession]:
    """Loads the definition for an agent into a builder session."""

    store = DefinitionStore(config.get_definition_path(agent))
    session = BuilderSession(
        store.load(), manifest_indent=config.get_manifest_indent()
    )
    return store, session


def _print_status(session: BuilderSession) -> None:
    status = session.status
    console.print(
        f"[bold]Voice:[/bold] {escape(status.voice)}  "
        f"[bold]Capabilities:[/bold] {status.capabilities_mapped} mapped  "
        f"[bold]Tools:[/bold] {status.tools_connected} connected"
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"JSON settings file (default: {DEFAULT_CONFIG_PATH.as_posix()}).",
    ),
) -> None:
    """
    Agent Studio command line.
    """
    try:
        config = ConfigProvider(config_path).load()
    except AgentStudioError as e:
        _fail(e)
    setup_logging(config.get_log_level())
    ctx.obj = config


@app.command()
def init(
    ctx: typer.Context,
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
    name: str = typer.Option("", "--name", "-n", help="Initial agent name."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
):
    """
    Create an empty agent definition.
    """
    try:
        config: StudioConfig = ctx.obj
        store = DefinitionStore(config.get_definition_path(agent))
        if store.exists() and not force:
            console.print("[yellow]Definition already exists.[/yellow]")
            return
        definition = AgentConfig.create_default(config.default_response_style)
        definition.name = name
        store.save(definition)
        console.print(
            f"[green]Initialized agent definition at {store.path}.[/green]"
        )
    except AgentStudioError as e:
        _fail(e)


@app.command()
def presets():
    """
    List the curated tones, capabilities, protocols, guardrails, and tools.
    """
    for field in TaxonomyField:
        table = Table(title=field.value.capitalize())
        table.add_column("Suggestion")
        for value in suggestions_for(field):
            table.add_row(value)
        console.print(table)

    tools = Table(title="Tool templates")
    tools.add_column("Name")
    tools.add_column("Description")
    tools.add_column("Mode")
    for template in TOOL_TEMPLATES:
        tools.add_row(template.name, template.description, template.mode.value)
    console.print(tools)


@app.command("set")
def set_field(
    ctx: typer.Context,
    field: str = typer.Argument(..., help="Free-text field or response_style."),
    value: str = typer.Argument(..., help="New value."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Replace a free-text field or the response style.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        session.assign(field, value)
        store.save(session.config)
        console.print(f"[green]Updated {field}.[/green]")
    except AgentStudioError as e:
        _fail(e)


@app.command()
def add(
    ctx: typer.Context,
    field: TaxonomyField = typer.Argument(..., help="Taxonomy list to extend."),
    value: str = typer.Argument(..., help="Label to append."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Append a label to a taxonomy list. Blank and duplicate labels are ignored.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        if session.add(field, value):
            store.save(session.config)
            console.print(
                f"[green]Added to {field.value}:[/green] {escape(value.strip())}"
            )
        else:
            console.print(f"[yellow]Nothing added to {field.value}.[/yellow]")
        _print_status(session)
    except AgentStudioError as e:
        _fail(e)


@app.command()
def toggle(
    ctx: typer.Context,
    field: TaxonomyField = typer.Argument(..., help="Taxonomy list to update."),
    value: str = typer.Argument(..., help="Label to switch on or off."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Switch a label on or off in a taxonomy list.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        label = value.strip()
        if not label:
            console.print(f"[yellow]Nothing toggled in {field.value}.[/yellow]")
            return
        present = session.toggle(field, label)
        store.save(session.config)
        state = "Enabled" if present else "Disabled"
        console.print(f"[green]{state} in {field.value}:[/green] {escape(label)}")
        _print_status(session)
    except AgentStudioError as e:
        _fail(e)


@app.command("add-tool")
def add_tool(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Tool name."),
    description: str = typer.Argument(..., help="What the tool unlocks."),
    mode: ToolMode = typer.Option(ToolMode.READ, "--mode", "-m", help="Access mode."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Attach a custom tool integration.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        tool = session.add_tool(
            ToolDraft(name=name, description=description, mode=mode)
        )
        if tool is None:
            console.print("[yellow]Tool needs both a name and a description.[/yellow]")
            return
        store.save(session.config)
        console.print(
            f"[green]Added tool {escape(tool.name)}[/green] (id: {tool.id})"
        )
    except AgentStudioError as e:
        _fail(e)


@app.command("use-template")
def use_template(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Tool template name (see 'presets')."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Attach a tool from the preset catalog.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        tool = session.use_template(name)
        if tool is None:
            console.print(f"[yellow]{escape(name)} is already attached.[/yellow]")
            return
        store.save(session.config)
        console.print(
            f"[green]Added tool {escape(tool.name)}[/green] (id: {tool.id})"
        )
    except AgentStudioError as e:
        _fail(e)


@app.command("remove-tool")
def remove_tool(
    ctx: typer.Context,
    tool_id: str = typer.Argument(..., help="Tool id shown by 'status'."),
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Detach a tool by its id.
    """
    try:
        store, session = _open_session(ctx.obj, agent)
        if not session.remove_tool(tool_id):
            console.print(f"[yellow]No tool with id {escape(tool_id)}.[/yellow]")
            return
        store.save(session.config)
        console.print(f"[green]Removed tool {escape(tool_id)}.[/green]")
    except AgentStudioError as e:
        _fail(e)


@app.command()
def status(
    ctx: typer.Context,
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Show the definition summary and attached tools.
    """
    try:
        _, session = _open_session(ctx.obj, agent)
        _print_status(session)
        if session.config.tools:
            table = Table(title="Tools")
            table.add_column("Id")
            table.add_column("Name")
            table.add_column("Mode")
            for tool in session.config.tools:
                table.add_row(tool.id, tool.name, tool.mode.value)
            console.print(table)
    except AgentStudioError as e:
        _fail(e)


@app.command()
def prompt(
    ctx: typer.Context,
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
):
    """
    Print the compiled system prompt.
    """
    try:
        _, session = _open_session(ctx.obj, agent)
        typer.echo(session.prompt)
    except AgentStudioError as e:
        _fail(e)


@app.command()
def manifest(
    ctx: typer.Context,
    agent: str = typer.Option(
        "default",
        "--agent",
        "-a",
        help=AGENT_HELP,
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the manifest JSON to this file."
    ),
):
    """
    Print or export the manifest JSON.
    """
    try:
        _, session = _open_session(ctx.obj, agent)
        text = session.manifest_text
        if output is None:
            typer.echo(text)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        console.print(f"[green]Manifest written to {output}.[/green]")
    except (AgentStudioError, OSError) as e:
        _fail(e)


@app.command()
def schema(indent: int = typer.Option(2, "--indent", help="JSON indentation.")):
    """
    Print the JSON schema of the manifest format.
    """
    typer.echo(json.dumps(manifest_json_schema(), indent=indent))


if __name__ == "__main__":
    app()
