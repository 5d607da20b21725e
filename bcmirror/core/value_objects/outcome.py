"""Resultat d'une reconciliation distant -> local."""

from enum import Enum


class ReconcileOutcome(Enum):
    """Action effectuee sur l'enregistrement local.

    Valeurs:
        CREATED: Enregistrement cree lors de la premiere synchronisation
        UPDATED: Au moins un champ modifie et sauvegarde
        UNCHANGED: Aucune ecriture (ressource non plus recente ou identique)
    """

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
