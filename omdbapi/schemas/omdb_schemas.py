from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


# Raw image payload returned by the poster endpoint.
Poster = bytes


class APIParam(BaseModel):
    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='allow'
    )


class Rating(_Record):
    source: str = Field('', alias='Source')
    value: str = Field('', alias='Value')


class MovieInfo(_Record):
    title: str = Field('', alias='Title')
    year: str = Field('', alias='Year')
    rated: str = Field('', alias='Rated')
    released: str = Field('', alias='Released')
    runtime: str = Field('', alias='Runtime')
    genre: str = Field('', alias='Genre')
    director: str = Field('', alias='Director')
    writer: str = Field('', alias='Writer')
    actors: str = Field('', alias='Actors')
    plot: str = Field('', alias='Plot')
    language: str = Field('', alias='Language')
    country: str = Field('', alias='Country')
    awards: str = Field('', alias='Awards')
    poster: str = Field('', alias='Poster')
    ratings: List[Rating] = Field(default_factory=list, alias='Ratings')
    metascore: str = Field('', alias='Metascore')
    imdb_rating: str = Field('', alias='imdbRating')
    imdb_votes: str = Field('', alias='imdbVotes')
    imdb_id: str = Field('', alias='imdbID')
    type: str = Field('', alias='Type')
    dvd: str = Field('', alias='DVD')
    box_office: str = Field('', alias='BoxOffice')
    production: str = Field('', alias='Production')
    website: str = Field('', alias='Website')
    # only sent for Type == 'series'
    total_seasons: Optional[str] = Field(None, alias='totalSeasons')
    response: str = Field('', alias='Response')


class SearchItem(_Record):
    title: str = Field('', alias='Title')
    year: str = Field('', alias='Year')
    imdb_id: str = Field('', alias='imdbID')
    type: str = Field('', alias='Type')
    poster: str = Field('', alias='Poster')


class SearchInfo(_Record):
    search: List[SearchItem] = Field(default_factory=list, alias='Search')
    total_results: str = Field('', alias='totalResults')
    response: str = Field('', alias='Response')


class ErrorEnvelope(BaseModel):
    response: str = Field('', alias='Response')
    error: str = Field('', alias='Error')

    model_config = ConfigDict(populate_by_name=True)
