"""Terminal output for the system specs and the roast."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from roastfetch.hardware.snapshot import TelemetrySnapshot
from roastfetch.roast.tiers import TierReport, classify_form_factor


def _label(name: str) -> str:
    return f"[bold green]{name}[/bold green]"


def _value(text: object) -> str:
    return f"[white]{escape(str(text))}[/white]"


def _tier(report: Optional[TierReport], attribute: str) -> str:
    if report is None:
        return ""
    return f" [dim]({getattr(report, attribute).value})[/dim]"


def print_specs(
    console: Console,
    snapshot: TelemetrySnapshot,
    report: Optional[TierReport] = None,
) -> None:
    """Print the information block: CPU, RAM, GPU, OS, form factor.

    When a tier report is given, the CPU, RAM and GPU lines show their tier.
    """
    total_gb = f"{snapshot.total_memory_gb:.2f}"
    used_gb = f"{snapshot.used_memory_gb:.2f}"

    console.print()
    console.print("[bold cyan]--- System Specs ---[/bold cyan]")
    console.print(
        f"  {_label('CPU')}: {_value(snapshot.cpu_brand)} "
        f"({_value(snapshot.cpu_core_count)} cores @ {_value(snapshot.cpu_frequency_mhz)} MHz)"
        f"{_tier(report, 'cpu')}"
    )
    console.print(
        f"  {_label('RAM')}: {_value(total_gb)} GB total, {_value(used_gb)} GB used"
        f"{_tier(report, 'memory')}"
    )
    console.print(f"  {_label('GPU')}: {_value(snapshot.gpu_name)}{_tier(report, 'gpu')}")
    console.print(f"  {_label('OS')}: {_value(snapshot.os_name)} {_value(snapshot.os_version)}")
    form_factor = classify_form_factor(snapshot.has_battery).value
    console.print(f"  {_label('Form Factor')}: {_value(form_factor)}")


def print_roasts(console: Console, roasts: Sequence[str]) -> None:
    """Print the roast block."""
    console.print()
    console.print("[bold red]--- The Roast ---[/bold red]")
    for roast in roasts:
        console.print(f"  [yellow]{escape(roast)}[/yellow]")
    console.print()
