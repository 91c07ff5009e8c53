"""
Couche domaine (core).

Contient les entités métier et les objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Enregistrements de la médiathèque (MovieRecord, TVShowRecord)
- value_objects/ : Objets valeur immutables (schémas de colonnes, résultats d'import)
"""
