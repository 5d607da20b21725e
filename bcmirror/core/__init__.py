"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur et
la hiérarchie d'erreurs. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Enregistrements locaux (BrightcovePlayer, BrightcoveVideo, BrightcovePlaylist)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Ressources distantes immutables et résultat de réconciliation
- errors : Exceptions métier
"""
