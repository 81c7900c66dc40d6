"""Shared enumerations used across modules."""

from __future__ import annotations

from enum import StrEnum


class Statut(StrEnum):
    ACTIF = "actif"
    INACTIF = "inactif"


class FavoriStatut(StrEnum):
    ACTIF = "actif"
    ARCHIVE = "archive"
    SUPPRIME = "supprime"


class Priorite(StrEnum):
    FAIBLE = "faible"
    MOYEN = "moyen"
    ELEVEE = "elevee"
    URGENT = "urgent"


class TypeElement(StrEnum):
    PRODUIT = "produit"
    ANNONCE = "annonce"
    DON = "don"
    ECHANGE = "echange"
    VENDEUR = "vendeur"
    CATEGORIE = "categorie"
    UTILISATEUR = "utilisateur"


class UserType(StrEnum):
    ADMIN = "admin"
    AGENT = "agent"
    VENDEUR = "vendeur"
    UTILISATEUR = "utilisateur"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"
