"""
Adaptateurs de bcmirror.

- api/ : Client HTTP Brightcove (OAuth, Player Management, CMS)
- cli/ : Interface en ligne de commande Typer
"""
