from __future__ import annotations

import typer

from sports_hub.cli.common import run_with_hub, session_scope
from sports_hub.cli.render import dashboard_lines
from sports_hub.core.catalog import get_league, iter_leagues
from sports_hub.core.enums import QuotaLevel, SportEnum
from sports_hub.services.dashboard import (
    Dashboard,
    DashboardLoadError,
    load_dashboard,
    refresh_dashboard,
)
from sports_hub.session import HubSession
from sports_hub.storage.quota import QuotaWarning

app = typer.Typer(no_args_is_help=True, help="League tables, fixtures and results.")


def _echo_warning(warning: QuotaWarning) -> None:
    fg = typer.colors.YELLOW if warning.level == QuotaLevel.HIGH else typer.colors.CYAN
    typer.secho(warning.message, fg=fg, err=True)


def _echo_dashboard(hub: HubSession, dashboard: Dashboard) -> None:
    for w in hub.warnings:
        _echo_warning(w)
    for line in dashboard_lines(
        dashboard,
        has_key=hub.credential is not None,
        daily_limit=hub.settings.quota_daily_limit,
    ):
        typer.echo(line)


def _fail(e: Exception) -> None:
    typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command("show")
def show_cmd(
    sport: SportEnum | None = typer.Option(None, "--sport", help="football or rugby."),
    league: str | None = typer.Option(None, "--league", help="League id (e.g. 39, six-nations)."),
    no_cache: bool = typer.Option(False, "--no-cache", help="Skip cached data for this load."),
) -> None:
    """Show standings, fixtures, results and (football) player stats."""

    with session_scope() as session:

        async def run(hub: HubSession) -> Dashboard:
            if sport is not None or league is not None:
                chosen_sport = sport or get_league(str(league)).sport
                hub.preferences.select(chosen_sport, league)
            notice = hub.startup_notice()
            if notice is not None:
                _echo_warning(notice)
            dashboard = await load_dashboard(hub, use_cache=not no_cache)
            _echo_dashboard(hub, dashboard)
            return dashboard

        try:
            run_with_hub(session, run)
        except (DashboardLoadError, KeyError, ValueError) as e:
            _fail(e)


@app.command("refresh")
def refresh_cmd() -> None:
    """Clear the cache and reload the selected league from the sources."""

    with session_scope() as session:

        async def run(hub: HubSession) -> Dashboard:
            dashboard = await refresh_dashboard(hub)
            _echo_dashboard(hub, dashboard)
            return dashboard

        try:
            run_with_hub(session, run)
        except DashboardLoadError as e:
            _fail(e)


@app.command("leagues")
def leagues_cmd() -> None:
    """List the leagues that can be shown."""

    for lg in iter_leagues():
        typer.echo(f"{lg.sport.value:<9} {lg.league_id:<13} {lg.name} ({lg.season})")


@app.command("quota")
def quota_cmd() -> None:
    """Show today's API-Football call count."""

    with session_scope() as session:

        async def run(hub: HubSession) -> None:
            count = hub.quota.current_count()
            typer.echo(f"API: {count}/{hub.settings.quota_daily_limit}")
            warning = hub.quota.warning_for(count)
            if warning is not None:
                _echo_warning(warning)

        run_with_hub(session, run)


@app.command("set-key")
def set_key_cmd(
    api_key: str = typer.Argument(..., help="API-Football key."),
) -> None:
    """Save the API-Football key and drop cached data."""

    with session_scope() as session:

        async def run(hub: HubSession) -> None:
            hub.set_credential(api_key)

        run_with_hub(session, run)
    typer.echo("API key saved. Cache cleared.")


@app.command("clear-key")
def clear_key_cmd() -> None:
    """Remove the saved key; data then comes from ESPN or curated tables."""

    with session_scope() as session:

        async def run(hub: HubSession) -> None:
            hub.set_credential(None)

        run_with_hub(session, run)
    typer.echo("API key removed. Cache cleared.")


@app.command("clear-cache")
def clear_cache_cmd() -> None:
    """Delete every cached response. Quota and key are kept."""

    with session_scope() as session:

        async def run(hub: HubSession) -> int:
            return hub.cache.clear()

        removed = run_with_hub(session, run)
    typer.echo(f"Removed {removed} cached entries.")
