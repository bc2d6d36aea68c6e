"""Main CLI application using Typer."""
import asyncio
import re

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..chat import ChatDispatcher, ConversationLog, DispatchOutcome
from ..chat.config import CRISIS_RESOURCES, DISCLAIMER, MAX_INPUT_CHARS, QUICK_REPLIES
from .providers import configure_logging, require_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="mind2care",
    help="AI wellness companion chat",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_WORDS = ("exit", "quit", "q")
QUICK_COMMAND = re.compile(r"/quick(\s+\S+)?")


def _print_resources() -> None:
    console.print(Panel(DISCLAIMER, title="Important", border_style="yellow"))

    table = Table(show_header=False, box=None)
    table.add_column("Resource", style="bold red")
    table.add_column("Contact")
    for label, contact in CRISIS_RESOURCES:
        table.add_row(label, contact)
    console.print(table)


def _print_quick_replies() -> None:
    console.print("[dim]Quick replies (send with /quick N):[/dim]")
    for i, reply in enumerate(QUICK_REPLIES, 1):
        console.print(f"[dim]  {i}. {reply}[/dim]")


def _print_stats(log: ConversationLog) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="bold cyan", width=15)
    table.add_column("Value")

    table.add_row("Session", log.session_id)
    table.add_row("Messages", str(log.message_count))
    table.add_row("Tokens used", str(log.tokens_used))

    console.print(table)


def _print_reply(outcome: DispatchOutcome) -> None:
    message = outcome.assistant_message
    if outcome.ok:
        console.print(f"[bold green]Companion:[/bold green] {escape(message.content)}")
        console.print(f"[dim]{message.created_at:%H:%M} - {message.tokens} tokens[/dim]\n")
    else:
        console.print(f"[bold red]Companion:[/bold red] {escape(message.content)}\n")


def _is_quick_command(text: str) -> bool:
    """True for "/quick" alone or followed by a single argument."""
    return QUICK_COMMAND.fullmatch(text) is not None


def _resolve_quick_reply(command: str) -> str | None:
    """Map '/quick N' onto the Nth quick reply, or None if N is not valid."""
    _, _, arg = command.partition(" ")
    try:
        index = int(arg.strip())
    except ValueError:
        return None
    if 1 <= index <= len(QUICK_REPLIES):
        return QUICK_REPLIES[index - 1]
    return None


def _check_length(text: str) -> bool:
    if len(text) > MAX_INPUT_CHARS:
        console.print(
            f"[yellow]Message is {len(text)} characters; the limit is {MAX_INPUT_CHARS}.[/yellow]"
        )
        return False
    return True


@app.command()
def chat(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, or error"
    ),
):
    """Interactive chat with the wellness companion."""
    configure_logging(log_level)

    async def _chat():
        llm = require_llm(console)
        log = ConversationLog()

        try:
            dispatcher = ChatDispatcher(llm, log)

            console.print("[bold cyan]mind2care Wellness Companion[/bold cyan]")
            _print_resources()
            _print_quick_replies()
            console.print("[dim]Type /stats for session info, 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Take care. Goodbye![/dim]")
                    break

                stripped = user_input.strip()
                if not stripped:
                    continue

                if stripped.lower() in EXIT_WORDS:
                    console.print("[dim]Take care. Goodbye![/dim]")
                    break

                if stripped == "/stats":
                    _print_stats(log)
                    continue

                if _is_quick_command(stripped):
                    quick = _resolve_quick_reply(stripped)
                    if quick is None:
                        _print_quick_replies()
                        continue
                    console.print(f"[bold yellow]You:[/bold yellow] {escape(quick)}")
                    user_input = quick

                if not _check_length(user_input):
                    continue

                with console.status("[dim]Companion is typing...[/dim]"):
                    outcome = await dispatcher.dispatch(user_input)
                _print_reply(outcome)

        finally:
            await llm.close()

    asyncio.run(_chat())


@app.command()
def ask(
    text: str = typer.Argument(..., help="What's on your mind"),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, or error"
    ),
):
    """Send a single message and print the companion's reply."""
    configure_logging(log_level)

    if not text.strip():
        console.print("[red]Error: message is empty[/red]")
        raise typer.Exit(code=1)
    if not _check_length(text):
        raise typer.Exit(code=1)

    async def _ask() -> DispatchOutcome:
        llm = require_llm(console)
        async with llm:
            dispatcher = ChatDispatcher(llm, ConversationLog())
            return await dispatcher.dispatch(text)

    outcome = asyncio.run(_ask())
    _print_reply(outcome)
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def resources():
    """Show the disclaimer and crisis support contacts."""
    _print_resources()


if __name__ == "__main__":
    app()
