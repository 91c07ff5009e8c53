"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Tous les services sont sans etat, d'ou des Singletons.
"""

from dependency_injector import containers, providers

from .adapters.csv.exporter import CSVExporter
from .config import Settings
from .services.csv_importer import CSVImporterService
from .services.similarity import RelevanceRanker


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        importer = container.csv_importer_service()
        ranker = container.relevance_ranker()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Services
    relevance_ranker = providers.Singleton(RelevanceRanker)
    csv_importer_service = providers.Singleton(CSVImporterService)

    # Adapters
    csv_exporter = providers.Singleton(CSVExporter)
