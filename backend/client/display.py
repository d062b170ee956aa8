"""Rich terminal UI components for the country listing and guides."""

from typing import Optional, Union

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .listing import Page

console = Console()

GUIDE_UNAVAILABLE = "Sorry! Could not load country guide."


def format_display_name(username: Optional[str]) -> str:
    """Capitalize the first letter of the username.

    Example: "nami" -> "Nami"; no username -> "Guest"
    """
    if not username:
        return "Guest"
    return username[0].upper() + username[1:]


def format_population(population: Union[int, str]) -> str:
    if isinstance(population, int):
        return f"{population:,}"
    return population


def render_header(username: Optional[str]) -> None:
    console.print(
        Panel(
            Text.assemble(
                ("Grand Line Guide", "bold blue"),
                "\n",
                ("Visit your favourite countries and cities with our travel guide.", "dim"),
            ),
            subtitle=f"Traveler: {format_display_name(username)}",
            border_style="blue",
        )
    )


def country_table(page: Page) -> Table:
    """Build the listing table for one page of countries."""
    table = Table(title="List of Countries", show_lines=False)
    table.add_column("Country", style="bold")
    table.add_column("Capital")
    table.add_column("Region")
    table.add_column("Population", justify="right")
    table.add_column("Languages", overflow="fold")
    table.add_column("Flag", overflow="fold", style="dim")

    for country in page.items:
        table.add_row(
            country.name,
            country.capital,
            country.region,
            format_population(country.population),
            country.languages,
            country.flag,
        )
    return table


def render_page(page: Page, search_text: str = "", region: str = "All") -> None:
    """Print one page of countries followed by the pager line."""
    filters = []
    if search_text.strip():
        filters.append(f"search: {search_text.strip()!r}")
    if region != "All":
        filters.append(f"region: {region}")
    if filters:
        console.print(f"[dim]{', '.join(filters)}[/dim]")

    if page.items:
        console.print(country_table(page))
    else:
        console.print("[yellow]No countries found.[/yellow]")

    previous = "[bold]Previous[/bold]" if page.has_previous else "[dim]Previous[/dim]"
    following = "[bold]Next[/bold]" if page.has_next else "[dim]Next[/dim]"
    console.print(f"{previous}  {page.number} / {page.total_pages}  {following}")


def render_guide(country: str, guide: str) -> None:
    console.print(
        Panel(
            Text(guide, overflow="fold"),
            title=f"Traveling to {country}",
            subtitle="Your AI travel guide",
            border_style="blue",
        )
    )
