"""
Commandes CLI de consultation du miroir local : players, recherche, metadonnees.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from bcmirror.adapters.cli.helpers import console, format_value, with_container
from bcmirror.services.media_source import METADATA_ATTRIBUTES


def players(
    api_client: Annotated[
        Optional[str],
        typer.Option("--api-client", help="Client API (defaut: BCMIRROR_API_CLIENT)"),
    ] = None,
    entity_ids: Annotated[
        bool,
        typer.Option("--entity-ids", help="Cles = IDs internes au lieu des IDs Brightcove"),
    ] = False,
) -> None:
    """Liste les players d'un client API."""
    asyncio.run(_players_async(api_client, entity_ids))


@with_container()
async def _players_async(container, api_client: Optional[str], entity_ids: bool) -> None:
    """Implementation async de la commande players."""
    owner = api_client or container.config().api_client
    entries = container.player_list_service().list(owner, use_entity_id=entity_ids)

    if not entries:
        console.print(f"[yellow]Aucun player pour le client API {owner}.[/yellow]")
        return

    table = Table(title=f"Players ({owner})")
    table.add_column("Cle", style="cyan")
    table.add_column("Nom")
    for key, name in entries.items():
        table.add_row(str(key), name)
    console.print(table)


def search(
    keywords: Annotated[str, typer.Argument(help="Mots-cles ('*' = joker)")],
    published: Annotated[
        bool,
        typer.Option("--published/--no-published", help="Inclure les videos publiees"),
    ] = True,
    unpublished: Annotated[
        bool,
        typer.Option(
            "--unpublished/--no-unpublished", help="Inclure les videos depubliees"
        ),
    ] = False,
) -> None:
    """Recherche des videos par mots-cles."""
    asyncio.run(_search_async(keywords, published, unpublished))


@with_container()
async def _search_async(
    container, keywords: str, published: bool, unpublished: bool
) -> None:
    """Implementation async de la commande search."""
    service = container.video_search_service()

    if not service.is_executable(keywords):
        for line in service.help_text():
            console.print(f"[dim]{line}[/dim]")
        raise typer.Exit(code=1)

    results = service.search(
        keywords,
        can_view_published=published,
        can_view_unpublished=unpublished,
    )
    if not results:
        console.print("[yellow]Aucune video trouvee.[/yellow]")
        for line in service.help_text():
            console.print(f"[dim]{line}[/dim]")
        return

    table = Table(title=f"Videos ({len(results)})")
    table.add_column("ID", justify="right")
    table.add_column("Video ID", style="cyan")
    table.add_column("Titre")
    for result in results:
        table.add_row(str(result.id), result.video_id, result.title)
    console.print(table)


def metadata(
    video_id: Annotated[str, typer.Argument(help="ID Brightcove de la video")],
) -> None:
    """Affiche les metadonnees de source media d'une video."""
    asyncio.run(_metadata_async(video_id))


@with_container()
async def _metadata_async(container, video_id: str) -> None:
    """Implementation async de la commande metadata."""
    video = container.video_repository().get_by_remote_id(video_id)
    if video is None:
        console.print(f"[red]Video {video_id} absente du miroir local.[/red]")
        raise typer.Exit(code=1)

    source = container.video_media_source()
    table = Table(title=video.name or video_id, show_header=False)
    table.add_column("Attribut", style="cyan")
    table.add_column("Valeur")
    for attribute, label in METADATA_ATTRIBUTES.items():
        table.add_row(label, format_value(source.get_metadata(video, attribute)))
    table.add_row("Thumbnail URI", source.get_metadata(video, "thumbnail_uri"))
    console.print(table)
