"""
Couche application (services).

- reconciler : Reconciliation generique distant -> local (ResourceKind, Reconciler)
- resource_kinds : Definitions player, video, playlist
- sync : Pilote de synchronisation (SyncService, SyncStats, SyncIssue)
- player_list : Listes de selection des players
- video_search : Recherche de videos par mots-cles
- media_source : Metadonnees de la source media "Brightcove Video"
"""
