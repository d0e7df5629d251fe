"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables are reused by several commands.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bbb_api.core.domain.models import Meeting


def print_banner(console: Console) -> None:
    title = Text("bbb-api", style="bold cyan")
    subtitle = Text("BigBlueButton API diagnostics", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_checks_table(title: str = "BigBlueButton Doctor") -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def build_meetings_table(meetings: list[Meeting]) -> Table:
    table = Table(title="Meetings")
    table.add_column("Meeting ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Running", style="green")
    table.add_column("Participants", justify="right")
    table.add_column("Moderators", justify="right")
    for meeting in meetings:
        table.add_row(
            meeting.meeting_id,
            meeting.meeting_name,
            "yes" if meeting.is_running else "no",
            str(meeting.participant_count),
            str(meeting.moderator_count),
        )
    return table
