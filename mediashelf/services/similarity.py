"""
Service de scoring de pertinence pour les resultats de recherche.

Le score place toujours, par ordre de priorite:
- correspondance exacte (MAX_SCORE)
- le candidat commence par la requete (MAX_SCORE - 1)
- le candidat contient la requete (MAX_SCORE - 2)
- sinon l'oppose de la distance d'edition (plus proche = plus grand)

Toutes les comparaisons sont insensibles a la casse.
Le scoring est deterministe et sans etat.
"""

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional, Sequence, TypeVar

from rapidfuzz.distance import Levenshtein

T = TypeVar("T")

MAX_SCORE: int = sys.maxsize
"""Score d'une correspondance exacte."""

NO_MATCH_SCORE: int = -sys.maxsize - 1
"""Score d'une categorie sans aucun resultat."""


def edit_distance(a: str, b: str) -> int:
    """
    Calculate the Levenshtein distance between two strings, ignoring case.

    Insertion, deletion and substitution each cost 1.
    Returns len(b) if a is empty and len(a) if b is empty.
    """
    return Levenshtein.distance(a.lower(), b.lower())


def relevance_score(candidate: str, query: str) -> int:
    """
    Calculate how well a candidate matches a query (higher is better).

    Never raises. An empty query is contained in every candidate,
    so it scores MAX_SCORE - 2 (or MAX_SCORE for an empty candidate).

    Args:
        candidate: Title or name to rank
        query: Text typed by the user

    Returns:
        MAX_SCORE, MAX_SCORE - 1, MAX_SCORE - 2, or -edit_distance
    """
    target = candidate.lower()
    q = query.lower()

    if target == q:
        return MAX_SCORE
    if target.startswith(q):
        return MAX_SCORE - 1
    if q in target:
        return MAX_SCORE - 2

    return -edit_distance(target, q)


@dataclass(frozen=True)
class ScoredCandidate:
    """Candidat texte associe a son score de pertinence."""

    text: str
    score: int


def _identity(item):
    return item


class RelevanceRanker:
    """
    Service for ranking search results by relevance to a query.

    Sorting is stable: candidates with equal scores keep their input order.
    """

    def rank(
        self,
        items: Iterable[T],
        query: str,
        key: Optional[Callable[[T], str]] = None,
    ) -> list[T]:
        """
        Sort items by relevance descending.

        Args:
            items: Items to rank
            query: Text typed by the user
            key: Extracts the title to score (identity by default)

        Returns:
            New list, most relevant first
        """
        key = key or _identity
        return sorted(items, key=lambda item: relevance_score(key(item), query), reverse=True)

    def score_results(self, candidates: Iterable[str], query: str) -> list[ScoredCandidate]:
        """
        Pair each candidate with its score and return them most relevant first.

        Args:
            candidates: Titles already fetched from an API or the local library
            query: Text typed by the user

        Returns:
            List of ScoredCandidate sorted by score descending
        """
        scored = [ScoredCandidate(text=c, score=relevance_score(c, query)) for c in candidates]
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored

    def search_library(
        self,
        items: Iterable[T],
        query: str,
        key: Optional[Callable[[T], str]] = None,
    ) -> list[T]:
        """
        Filtre puis classe les elements de la mediatheque locale.

        La requete est nettoyee des espaces ; une requete vide ne retourne rien.
        Seuls les elements dont le titre contient la requete
        (insensible a la casse) sont conserves.
        """
        trimmed = query.strip()
        if not trimmed:
            return []
        key = key or _identity
        needle = trimmed.lower()
        matching = [item for item in items if needle in key(item).lower()]
        return self.rank(matching, trimmed, key)

    def best_score(
        self,
        items: Sequence[T],
        query: str,
        key: Optional[Callable[[T], str]] = None,
    ) -> int:
        """Score du premier element (deja classe), ou NO_MATCH_SCORE si vide."""
        if not items:
            return NO_MATCH_SCORE
        key = key or _identity
        return relevance_score(key(items[0]), query)

    def order_categories(
        self,
        results_by_category: Mapping[str, Sequence[T]],
        query: str,
        key: Optional[Callable[[T], str]] = None,
    ) -> list[str]:
        """
        Ordonne les categories de resultats selon le score de leur meilleur element.

        Args:
            results_by_category: Resultats deja classes, par categorie
            query: Texte saisi par l'utilisateur
            key: Extrait le titre a scorer

        Returns:
            Noms de categories, la plus pertinente en premier
        """
        return sorted(
            results_by_category,
            key=lambda category: self.best_score(results_by_category[category], query, key),
            reverse=True,
        )
