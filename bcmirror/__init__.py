"""
bcmirror - Miroir local des entites Brightcove (players, videos, playlists).

Ce package synchronise les ressources de l'hebergeur video Brightcove vers
une base SQL locale, puis les expose pour les listes de selection, la
recherche par mots-cles et les metadonnees de source media.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (reconciliation, synchronisation, recherche)
- adapters/ : Couche infrastructure (CLI, client API Brightcove)
- infrastructure/ : Persistance SQLModel
"""

__version__ = "0.1.0"
