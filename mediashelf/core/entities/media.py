"""
Library record entities.

Records built by the CSV importer and handed to the persistence layer.
List-like fields (genres, directors, cast...) are kept as the
comma-separated strings found in the source file.
"""

from dataclasses import dataclass
from typing import Optional


def _split_list(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class MovieRecord:
    """
    Movie tracked in the library.

    Attributes:
        title: Movie title (required)
        watched: Whether the movie has been watched
        year: Release year
        rating: User rating
        tmdb_rating: TMDB vote average
        poster_path: TMDB poster path
        backdrop_path: TMDB backdrop path
        runtime: Runtime in minutes
        genres: Comma-separated genre names
        overview: Plot summary
        release_date: Release date (yyyy-MM-dd)
        tmdb_id: The Movie Database ID
        directors: Comma-separated director names
        cast: Comma-separated main cast names
    """

    title: str = ""
    watched: bool = False
    year: Optional[int] = None
    rating: Optional[float] = None
    tmdb_rating: Optional[float] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    runtime: Optional[int] = None
    genres: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    tmdb_id: Optional[str] = None
    directors: Optional[str] = None
    cast: Optional[str] = None

    @property
    def genre_list(self) -> list[str]:
        return _split_list(self.genres)

    @property
    def director_list(self) -> list[str]:
        return _split_list(self.directors)

    @property
    def cast_list(self) -> list[str]:
        return _split_list(self.cast)


@dataclass
class TVShowRecord:
    """
    TV show tracked in the library.

    Attributes:
        name: Show name (required)
        watched: Whether the show has been watched
        year: First air year
        rating: User rating
        tmdb_rating: TMDB vote average
        poster_path: TMDB poster path
        backdrop_path: TMDB backdrop path
        seasons: Season information (e.g. "Season 1; Season 2")
        genres: Comma-separated genre names
        overview: Show description
        air_date: First air date
        tmdb_id: The Movie Database ID
        creators: Comma-separated creator names
        cast: Comma-separated main cast names
        status: Status such as "Ended" or "Returning Series"
        number_of_seasons: Number of seasons
        number_of_episodes: Number of episodes
    """

    name: str = ""
    watched: bool = False
    year: Optional[int] = None
    rating: Optional[float] = None
    tmdb_rating: Optional[float] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    seasons: Optional[str] = None
    genres: Optional[str] = None
    overview: Optional[str] = None
    air_date: Optional[str] = None
    tmdb_id: Optional[str] = None
    creators: Optional[str] = None
    cast: Optional[str] = None
    status: Optional[str] = None
    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None

    @property
    def genre_list(self) -> list[str]:
        return _split_list(self.genres)

    @property
    def creator_list(self) -> list[str]:
        return _split_list(self.creators)

    @property
    def cast_list(self) -> list[str]:
        return _split_list(self.cast)

    @property
    def season_list(self) -> list[str]:
        if not self.seasons:
            return []
        return [part.strip() for part in self.seasons.split(";") if part.strip()]
