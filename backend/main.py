"""
Grand Line Guide - terminal front end.

Lists countries from the REST Countries directory with search, region
filter and pagination, and shows an AI-written travel guide for a country.
Accounts and guides are served by the Grand Line Guide backend
(see run_api.py).

Usage:
    python main.py signup
    python main.py login
    python main.py countries --search jpn
    python main.py countries --region Asia --page 2
    python main.py browse
    python main.py guide Germany
"""

import argparse
import asyncio
import logging
import sys

from rich.prompt import Prompt

from client.backend import BackendClient
from client.config import ClientSettings, get_client_settings
from client.countries import CountryDirectoryClient
from client.display import (
    GUIDE_UNAVAILABLE,
    console,
    format_display_name,
    render_guide,
    render_header,
    render_page,
)
from client.exceptions import BackendRequestError
from client.listing import REGIONS, ListingController
from client.session import BootstrapOutcome, Session, bootstrap


def _backend(settings: ClientSettings) -> BackendClient:
    return BackendClient(settings.backend_url, timeout=settings.request_timeout)


def _directory(settings: ClientSettings) -> CountryDirectoryClient:
    return CountryDirectoryClient(settings.countries_url, timeout=settings.request_timeout)


async def require_login(session: Session, backend: BackendClient) -> bool:
    """Run the session bootstrap; print a hint when a login is needed."""
    result = await bootstrap(session, backend)
    if result.outcome is BootstrapOutcome.LOGIN_REQUIRED:
        console.print("[yellow]Please log in first:[/yellow] python main.py login")
        return False
    return True


async def cmd_signup(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    username = args.username or Prompt.ask("Username")
    password = Prompt.ask("Password", password=True)
    confirm = Prompt.ask("Confirm Password", password=True)
    if password != confirm:
        console.print("[red]Error:[/red] Passwords do not match")
        return 1

    async with _backend(settings) as backend:
        try:
            token = await backend.signup(username, password)
        except BackendRequestError as e:
            console.print(f"[red]Error:[/red] {e.message or 'User already exists'}")
            return 1

    session.save(token, username)
    console.print(f"[green]Welcome aboard, {format_display_name(username)}![/green]")
    return 0


async def cmd_login(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    username = args.username or Prompt.ask("Username")
    password = Prompt.ask("Password", password=True)

    async with _backend(settings) as backend:
        try:
            token = await backend.login(username, password)
        except BackendRequestError as e:
            console.print(f"[red]Error:[/red] {e.message or 'Login failed'}")
            return 1

    session.save(token, username)
    console.print(f"[green]Logged in as {format_display_name(username)}[/green]")
    return 0


async def cmd_logout(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    session.clear()
    console.print("Signed out.")
    return 0


async def cmd_whoami(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    async with _backend(settings) as backend:
        if not await require_login(session, backend):
            return 1
    render_header(session.username)
    return 0


async def cmd_countries(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    async with _backend(settings) as backend:
        if not await require_login(session, backend):
            return 1

    async with _directory(settings) as directory:
        controller = ListingController(
            directory,
            debounce_seconds=settings.debounce_seconds,
            page_size=settings.page_size,
        )
        controller.search_text = args.search
        controller.region = args.region
        await controller.refresh()
        controller.go_to_page(args.page)

    render_header(session.username)
    render_page(controller.current_page(), controller.search_text, controller.region)
    return 0


BROWSE_HELP = (
    "[dim]Type to search by name or code, empty line to clear. "
    "Commands: n / p (page), :region <name>, :guide <country>, q (quit)[/dim]"
)


async def browse_guide(backend: BackendClient, country: str) -> None:
    with console.status(f"Traveling to {country}... Please Wait"):
        try:
            guide = await backend.country_guide(country)
        except BackendRequestError:
            guide = GUIDE_UNAVAILABLE
    render_guide(country, guide)


async def cmd_browse(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    async with _backend(settings) as backend, _directory(settings) as directory:
        if not await require_login(session, backend):
            return 1

        render_header(session.username)
        controller = ListingController(
            directory,
            debounce_seconds=settings.debounce_seconds,
            page_size=settings.page_size,
        )
        await controller.refresh()

        try:
            while True:
                render_page(controller.current_page(), controller.search_text, controller.region)
                console.print(BROWSE_HELP)
                line = await asyncio.to_thread(Prompt.ask, "Search", default="", show_default=False)
                command = line.strip()

                if command == "q":
                    break
                elif command == "n":
                    controller.next_page()
                    continue
                elif command == "p":
                    controller.previous_page()
                    continue
                elif command.startswith(":region"):
                    region = command[len(":region"):].strip().title() or "All"
                    if region not in REGIONS:
                        console.print(f"[red]Unknown region.[/red] Choose from: {', '.join(REGIONS)}")
                        continue
                    controller.set_region(region)
                elif command.startswith(":guide"):
                    country = command[len(":guide"):].strip()
                    await browse_guide(backend, country)
                    continue
                else:
                    controller.set_search_text(line)

                await controller.wait_until_idle()
        finally:
            controller.close()
    return 0


async def cmd_guide(args: argparse.Namespace, settings: ClientSettings, session: Session) -> int:
    async with _backend(settings) as backend:
        if not await require_login(session, backend):
            return 1
        await browse_guide(backend, args.country)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grand Line Guide: browse countries and get an AI travel guide"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    signup = subparsers.add_parser("signup", help="Create an account")
    signup.add_argument("--username", "-u", help="Username (prompted if omitted)")
    signup.set_defaults(handler=cmd_signup)

    login = subparsers.add_parser("login", help="Log in and store the session")
    login.add_argument("--username", "-u", help="Username (prompted if omitted)")
    login.set_defaults(handler=cmd_login)

    logout = subparsers.add_parser("logout", help="Forget the stored session")
    logout.set_defaults(handler=cmd_logout)

    whoami = subparsers.add_parser("whoami", help="Verify the stored session")
    whoami.set_defaults(handler=cmd_whoami)

    countries = subparsers.add_parser("countries", help="List countries")
    countries.add_argument("--search", "-s", default="", help="Country name or code")
    countries.add_argument("--region", "-r", default="All", choices=REGIONS, help="Region filter")
    countries.add_argument("--page", "-p", type=int, default=1, help="Page number (1-indexed)")
    countries.set_defaults(handler=cmd_countries)

    browse = subparsers.add_parser("browse", help="Interactive country browser")
    browse.set_defaults(handler=cmd_browse)

    guide = subparsers.add_parser("guide", help="Show the AI travel guide for a country")
    guide.add_argument("country", help="Country name, e.g. Germany")
    guide.set_defaults(handler=cmd_guide)

    return parser


def cli(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = get_client_settings()
    session = Session(settings.session_file).load()
    return asyncio.run(args.handler(args, settings, session))


if __name__ == "__main__":
    sys.exit(cli())
