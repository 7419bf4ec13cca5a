"""End-to-end round trips through nested records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pytest

from fieldstring import (
    FieldReader,
    FieldWriter,
    FormatError,
    decode_list,
    dumps,
    encode_list,
    loads,
    parse_fields,
)

from cinema import Movie, Person, Review, ReviewStore


@dataclass
class Listing:
    cinema: str | None = None
    movie: Movie | None = None

    def to_field_string(self) -> str:
        return FieldWriter().put_string("cinema", self.cinema).put_object("movie", self.movie).build()

    def from_field_string(self, s: str) -> Listing:
        r = FieldReader.parse(s)
        self.cinema = r.get_string("cinema")
        self.movie = r.get_object("movie", Movie)
        return self


def _matrix() -> Movie:
    return Movie(
        movie_title="The Matrix",
        duration_min=136,
        rating=4.5,
        movie_director="Lana Wachowski",
        released=datetime(1999, 3, 31, 20, 0),
        now_showing=True,
        cast=["Keanu Reeves", "Carrie-Anne Moss"],
        review_store=ReviewStore([Review("Mind-bending", 5.0), Review("Dated effects", 3.5)]),
    )


MATRIX = (
    "movie_title#The Matrix~durationMin#136~rating#4.5~movie_director#Lana Wachowski"
    "~released#1999-03-31T20:00:00~now_showing#true~cast#{Keanu Reeves&Carrie-Anne Moss}"
    "~reviewStore#{reviews#{{first#Mind-bending~second#5.0}&{first#Dated effects~second#3.5}}}"
)


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

def test_movie_serialized_form():
    assert dumps(_matrix()) == MATRIX

def test_movie_round_trip():
    assert loads(Movie, dumps(_matrix())) == _matrix()

def test_all_null_round_trip():
    movie = Movie(movie_title=None, movie_director=None, cast=None, review_store=None)
    assert loads(Movie, dumps(movie)) == movie

def test_empty_collections_round_trip():
    movie = Movie(movie_title="", cast=[], review_store=ReviewStore([]))
    assert loads(Movie, dumps(movie)) == movie

def test_null_review_entries_round_trip():
    movie = Movie(review_store=ReviewStore([None, Review(None, 1.0)]))
    assert loads(Movie, dumps(movie)) == movie

def test_absent_review_list_round_trip():
    movie = Movie(review_store=ReviewStore(None))
    assert loads(Movie, dumps(movie)) == movie

def test_cast_of_one_null_round_trip():
    movie = Movie(cast=[None])
    assert loads(Movie, dumps(movie)) == movie

def test_null_movie_round_trip():
    assert loads(Movie, dumps(None)) is None


# ---------------------------------------------------------------------------
# Nesting safety
# ---------------------------------------------------------------------------

def test_delimiters_inside_nested_markers():
    """Splitter, separator and list separator appear only inside the movie envelope."""
    listing = Listing("Jurong Point", _matrix())
    s = dumps(listing)
    assert list(parse_fields(s)) == ["cinema", "movie"]
    assert parse_fields(s)["movie"] == "{" + MATRIX + "}"
    assert loads(Listing, s) == listing

def test_nested_null_movie():
    listing = Listing("Orchard", None)
    assert dumps(listing) == "cinema#Orchard~movie#{`null`}"
    assert loads(Listing, dumps(listing)) == listing


# ---------------------------------------------------------------------------
# Legacy data and known format constraints
# ---------------------------------------------------------------------------

def test_decode_legacy_string():
    s = (
        "movie_title#The Matrix~durationMin#136~rating#4.5~movie_director#`null`"
        "~released#1999-03-31T00:00~now_showing#false"
        "~cast#{Keanu Reeves&Laurence Fishburne}~reviewStore#{`null`}"
    )
    movie = loads(Movie, s)
    assert movie.movie_title == "The Matrix"
    assert movie.movie_director is None
    assert movie.released == datetime(1999, 3, 31)
    assert movie.cast == ["Keanu Reeves", "Laurence Fishburne"]
    assert movie.review_store is None

def test_field_order_is_irrelevant():
    s = "city#Paris~age#5"
    assert loads(Person, s) == Person(5, "Paris")

def test_list_of_records_with_inner_list_separator():
    """Element splitting does not track nesting, so a cast list inside a list breaks."""
    encoded = encode_list([_matrix()], "movies")
    with pytest.raises(FormatError):
        decode_list(Movie, parse_fields(encoded)["movies"])

def test_splitter_in_leaf_string_corrupts_record():
    movie = Movie(movie_title="Dusk~Dawn")
    with pytest.raises(FormatError):
        loads(Movie, dumps(movie))
