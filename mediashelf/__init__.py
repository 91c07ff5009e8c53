"""
MediaShelf - Suivi de mediatheque personnelle (films, series, livres, comics, jeux).

Ce package fournit le coeur reutilisable de l'application :
le classement des resultats de recherche par pertinence et l'import
de fichiers CSV vers des enregistrements types.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, objets valeur)
- services/ : Couche application (scoring, import CSV, schemas)
- adapters/ : Couche infrastructure (codec CSV, CLI)
"""

__version__ = "0.1.0"
