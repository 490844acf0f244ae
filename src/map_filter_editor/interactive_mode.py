"""
Interactive CLI mode for map_filter_editor.

This module provides an interactive terminal interface around a
FilterEditorSession, for trying filters and editor transitions by hand:
- Rich terminal UI with colored output
- Combinator edits (/op, /add, /set, /del)
- Mode requests (/expr, /filter, /clear)
- Any other input is read as a JSON filter value
"""

import json
import sys
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from src.map_filter_editor.core.exceptions import MapFilterEditorError
from src.map_filter_editor.core.settings import validate_settings
from src.map_filter_editor.editor.session import FilterEditorSession
from src.map_filter_editor.models.filter_state import EditorMode
from src.map_filter_editor.tools.filter_migrator import migrate_filter
from src.map_filter_editor.utils.logger import setup_logging


console = Console()

MODE_COLORS = {
    EditorMode.SIMPLE: "green",
    EditorMode.NESTED_UNSUPPORTED: "yellow",
    EditorMode.EXPRESSION: "magenta",
}


class InteractiveFilterEditor:
    """
    Interactive CLI interface for a filter editor session.

    Provides a rich terminal UI with:
    - The current value, mode and per-operand errors
    - Commands mirroring the editor buttons
    - A history of committed values
    """

    def __init__(self, filter: Any = None):
        """
        Initialize the interactive session.

        Args:
            filter: Initial filter value
        """
        self.history: List[Any] = []
        self.session = FilterEditorSession(filter, on_change=self.history.append)

    def display_welcome(self):
        """Display welcome banner and instructions."""
        welcome_text = Text()
        welcome_text.append("Map Filter Editor ", style="bold blue")
        welcome_text.append("- Interactive Mode", style="bold white")

        help_text = (
            "[cyan]Commands:[/cyan]\n"
            "  [yellow]/help[/yellow]   - Show full help\n"
            "  [yellow]/show[/yellow]   - Show the editor\n"
            "  [yellow]/exit[/yellow]   - Quit\n\n"
            "[dim]Type a JSON filter to load it, or a command starting with /[/dim]"
        )

        console.print(Panel(help_text, title=welcome_text, border_style="blue", box=box.DOUBLE))
        console.print()

    def display_help(self):
        """Display detailed help information."""
        console.print(Panel(
            "[bold cyan]Help - Map Filter Editor Interactive Mode[/bold cyan]\n\n"
            "[yellow]Filter editor:[/yellow]\n"
            "  [green]/op <all|any|none>[/green] - Change the combining operator\n"
            "  [green]/add[/green]               - Add a sub-filter\n"
            "  [green]/set <i> <json>[/green]    - Replace sub-filter i (1-based)\n"
            "  [green]/del <i>[/green]           - Delete sub-filter i (1-based)\n\n"
            "[yellow]Modes:[/yellow]\n"
            "  [green]/expr[/green]              - Upgrade to expression\n"
            "  [green]/filter[/green]            - Switch to the filter editor\n"
            "  [green]/clear[/green]             - Delete the expression\n\n"
            "[yellow]Other:[/yellow]\n"
            "  [green]/show[/green]              - Show the editor\n"
            "  [green]/migrate[/green]           - Preview the migrated filter\n"
            "  [green]/history[/green]           - Values produced by edits\n"
            "  [green]/exit[/green], [green]/quit[/green]       - Quit\n\n"
            "[yellow]Examples:[/yellow]\n"
            '  [dim]["==", "class", "park"][/dim]\n'
            '  [dim]/set 1 ["in", "class", "park", "forest"][/dim]\n'
            '  [dim]["all", ["==", ["get", "class"], "park"]][/dim]',
            border_style="cyan"
        ))

    def display_editor(self):
        """Display the current editor view."""
        view = self.session.view()
        color = MODE_COLORS[view.mode]

        if view.mode == EditorMode.SIMPLE:
            table = Table(
                title=f"[{color}]Filter ({view.combining_operator})[/{color}]",
                border_style=color,
                show_header=True,
                header_style=f"bold {color}"
            )
            table.add_column("#", justify="right", style="dim", width=4)
            table.add_column("Sub-filter", style="bright_white")
            table.add_column("Error", style="red")

            for position, operand in enumerate(view.operands, 1):
                table.add_row(str(position), json.dumps(operand), view.operand_errors.get(position, ""))

            if 0 in view.operand_errors:
                table.caption = f"[red]{view.operand_errors[0]}[/red]"
            console.print(table)

        elif view.mode == EditorMode.NESTED_UNSUPPORTED:
            console.print(Panel(
                "Nested filters are not supported.\n[dim]Use /expr to upgrade to expression[/dim]",
                title=f"[{color}]Filter[/{color}]",
                border_style=color
            ))

        else:
            body = JSON.from_data(view.value) if view.value is not None else Text("null", style="dim")
            console.print(Panel(body, title=f"[{color}]Expression[/{color}]", border_style=color))
            for path, message in sorted(view.filter_errors.items()):
                console.print(f"[red]• {path}: {message}[/red]")
            if view.offer_filter_editor:
                console.print("[dim]You've entered an old style filter, use /filter to switch to the filter editor[/dim]")

    def display_history(self):
        """Display values produced by edits."""
        if not self.history:
            console.print("[dim]No edits yet[/dim]")
            return

        table = Table(
            title=f"[bold cyan]History[/bold cyan] [dim]({len(self.history)} values)[/dim]",
            border_style="cyan",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Value", style="bright_white")

        for i, value in enumerate(self.history[-20:], 1):
            table.add_row(str(i), json.dumps(value))

        console.print(table)

    def handle_command(self, command: str) -> bool:
        """
        Handle a command or a JSON value.

        Args:
            command: Input line (e.g., '/add', '["==", "a", 1]')

        Returns:
            True to continue, False to exit
        """
        name, _, argument = command.strip().partition(" ")
        name = name.lower()
        argument = argument.strip()

        if name in ["/exit", "/quit"]:
            return False

        try:
            if name == "/help":
                self.display_help()
            elif name == "/show":
                self.display_editor()
            elif name == "/history":
                self.display_history()
            elif name == "/migrate":
                console.print(JSON.from_data(migrate_filter(self.session.filter)))
            elif name == "/op":
                self.session.change_operator(argument)
                self.display_editor()
            elif name == "/add":
                self.session.add_sub_filter()
                self.display_editor()
            elif name == "/set":
                position, _, value = argument.partition(" ")
                self.session.change_sub_filter(int(position), json.loads(value))
                self.display_editor()
            elif name == "/del":
                self.session.delete_sub_filter(int(argument))
                self.display_editor()
            elif name == "/expr":
                self.session.upgrade_to_expression()
                self.display_editor()
            elif name == "/filter":
                self.session.switch_to_filter_editor()
                self.display_editor()
            elif name == "/clear":
                self.session.clear_expression()
                self.display_editor()
            elif name.startswith("/"):
                console.print(f"[yellow]⚠[/yellow] Unknown command: {name}")
                console.print("[dim]Use /help to list commands[/dim]\n")
            else:
                self.session.receive(json.loads(command))
                self.display_editor()
        except (MapFilterEditorError, ValueError) as e:
            console.print(Panel(f"[red]{e}[/red]", title="[red]✗ Error[/red]", border_style="red"))

        return True

    def run(self):
        """Run the interactive session."""
        self.display_welcome()
        self.display_editor()

        try:
            while True:
                try:
                    line = Prompt.ask("\n[bold cyan]filter>[/bold cyan]", default="").strip()
                except EOFError:
                    break

                if not line:
                    continue

                if not self.handle_command(line):
                    break

        except KeyboardInterrupt:
            console.print("\n\n[yellow]Interrupted[/yellow]")

        finally:
            console.print("\n[bold cyan]Session closed[/bold cyan]")
            console.print(JSON.from_data(self.session.filter))


def main(argv: Optional[List[str]] = None):
    """Main entry point for interactive mode."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        validate_settings()
    except ValueError as e:
        console.print(Panel(f"[red]{e}[/red]", title="[red]✗ Invalid settings[/red]", border_style="red"))
        raise

    setup_logging(level="WARNING")

    initial = json.loads(argv[0]) if argv else None
    InteractiveFilterEditor(initial).run()


if __name__ == "__main__":
    main()
