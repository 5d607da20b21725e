"""
Commandes CLI de synchronisation des players, videos et playlists.
"""

import asyncio
from typing import Annotated, Optional, Union

import typer
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)

from bcmirror.adapters.cli.helpers import console, suppress_loguru, with_container
from bcmirror.core.errors import BrightcoveMirrorError, RemoteError
from bcmirror.core.value_objects import ReconcileOutcome
from bcmirror.services.sync import SyncIssue

sync_app = typer.Typer(help="Synchronise le miroir local depuis Brightcove")

_LABELS = {"player": "players", "video": "videos", "playlist": "playlists"}

IdsOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--id",
        help="ID Brightcove a synchroniser (repetable). Par defaut : tout le compte",
    ),
]
ApiClientOption = Annotated[
    Optional[str],
    typer.Option(
        "--api-client",
        help="Client API des nouveaux enregistrements (defaut: BCMIRROR_API_CLIENT)",
    ),
]


@sync_app.command("players")
def sync_players(ids: IdsOption = None, api_client: ApiClientOption = None) -> None:
    """Synchronise les players."""
    asyncio.run(_sync_async("player", ids, api_client))


@sync_app.command("videos")
def sync_videos(ids: IdsOption = None, api_client: ApiClientOption = None) -> None:
    """Synchronise les videos."""
    asyncio.run(_sync_async("video", ids, api_client))


@sync_app.command("playlists")
def sync_playlists(ids: IdsOption = None, api_client: ApiClientOption = None) -> None:
    """Synchronise les playlists."""
    asyncio.run(_sync_async("playlist", ids, api_client))


@with_container()
async def _sync_async(
    container,
    kind: str,
    ids: Optional[list[str]],
    api_client: Optional[str],
) -> None:
    """Implementation async des commandes sync."""
    config = container.config()
    if not config.brightcove_enabled:
        console.print("[red]Compte Brightcove non configure.[/red]")
        console.print(
            "[dim]Definir BCMIRROR_ACCOUNT_ID, BCMIRROR_CLIENT_ID "
            "et BCMIRROR_CLIENT_SECRET.[/dim]"
        )
        raise typer.Exit(code=1)

    owner = api_client or config.api_client
    label = _LABELS[kind]
    service = container.sync_service()
    client = container.brightcove_client()

    console.print(
        f"[bold cyan]Synchronisation des {label}[/bold cyan] "
        f"(client API: {owner})\n"
    )

    try:
        with suppress_loguru():
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=console,
                transient=False,
            ) as progress:
                task = progress.add_task(
                    f"[cyan]{label.capitalize()}...",
                    total=len(ids) if ids else None,
                )

                def on_progress(
                    remote_id: str, outcome: Union[ReconcileOutcome, SyncIssue]
                ) -> None:
                    """Callback de progression."""
                    progress.advance(task)
                    if outcome is ReconcileOutcome.CREATED:
                        progress.console.print(f"  [green]+[/green] {remote_id}")
                    elif outcome is ReconcileOutcome.UPDATED:
                        progress.console.print(f"  [yellow]~[/yellow] {remote_id}")
                    elif outcome is SyncIssue.SKIPPED:
                        progress.console.print(f"  [dim]-[/dim] {remote_id} - introuvable")
                    elif outcome is SyncIssue.FAILED:
                        progress.console.print(f"  [red]x[/red] {remote_id} - echec")

                if ids:
                    stats = await service.sync_ids(
                        kind, ids, owner, on_progress=on_progress
                    )
                else:
                    stats = await service.sync_all(kind, owner, on_progress=on_progress)
    except RemoteError as e:
        console.print(f"[red]Erreur Brightcove:[/red] {e}")
        raise typer.Exit(code=1)
    except BrightcoveMirrorError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        await client.close()

    console.print("\n[bold]Resume:[/bold]")
    console.print(f"  [green]{stats.created}[/green] cree(s)")
    console.print(f"  [yellow]{stats.updated}[/yellow] mis a jour")
    console.print(f"  [dim]{stats.unchanged}[/dim] inchange(s)")
    if stats.skipped > 0:
        console.print(f"  [dim]{stats.skipped}[/dim] introuvable(s)")
    if stats.failed > 0:
        console.print(f"  [red]{stats.failed}[/red] echec(s)")
