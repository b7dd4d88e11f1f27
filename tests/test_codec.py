from __future__ import annotations

import json

import pytest

from movieShelf.errors import DecodeError
from movieShelf.metadata.core.codec import decode, decode_record, encode, record_to_dict
from movieShelf.settings import IMAGE_BASE_URL
from tests.conftest import make_movie


def _wire(movie_id=1, **overrides):
    item = {
        "adult": False,
        "id": movie_id,
        "title": "Oppenheimer",
        "poster_path": "/8Gxv8gSFCU0XGDykEGv7zR1n2ua.jpg",
        "overview": "The story of J. Robert Oppenheimer.",
        "release_date": "2023-07-19",
        "vote_average": 8.1,
        "vote_count": 9000,
        "original_language": "en",
    }
    item.update(overrides)
    return item


def test_decode_catalog_response():
    body = json.dumps({"page": 1, "results": [_wire(872585), _wire(2, title="Barbie")]}).encode()

    movies = decode(body)

    assert [m.id for m in movies] == [872585, 2]
    first = movies[0]
    assert first.title == "Oppenheimer"
    assert first.poster_path == "/8Gxv8gSFCU0XGDykEGv7zR1n2ua.jpg"
    assert first.vote_average == pytest.approx(8.1)
    assert first.original_language == "en"
    assert first.poster_url == IMAGE_BASE_URL + "/8Gxv8gSFCU0XGDykEGv7zR1n2ua.jpg"


def test_decode_empty_results():
    assert decode(b'{"results": []}') == []


def test_integer_vote_average_becomes_float():
    movie = decode_record(json.dumps(_wire(vote_average=7)))
    assert isinstance(movie.vote_average, float)
    assert movie.rating_label == "7.0"


def test_null_poster_path_decodes_to_empty():
    movie = decode_record(json.dumps(_wire(poster_path=None)))
    assert movie.poster_path == ""
    assert movie.poster_url is None


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b"\xff\xfe",
        b"[]",
        b'{"page": 1}',
        b'{"results": {"id": 1}}',
        json.dumps({"results": [{"id": 1, "title": "No other keys"}]}).encode(),
        json.dumps({"results": [_wire(id="1")]}).encode(),
        json.dumps({"results": [_wire(id=True)]}).encode(),
        json.dumps({"results": [_wire(vote_average="8.1")]}).encode(),
        json.dumps({"results": ["just a string"]}).encode(),
    ],
)
def test_decode_rejects_malformed_payloads(payload):
    with pytest.raises(DecodeError):
        decode(payload)


def test_decode_record_requires_every_field():
    item = _wire()
    del item["original_language"]
    with pytest.raises(DecodeError, match="original_language"):
        decode_record(json.dumps(item))


def test_encode_uses_wire_keys():
    movie = make_movie(42, title="Spirited Away", original_language="ja")
    data = json.loads(encode(movie))
    assert data == record_to_dict(movie)
    assert set(data) == {
        "id", "title", "poster_path", "overview",
        "release_date", "vote_average", "original_language",
    }


@pytest.mark.parametrize(
    "movie",
    [
        make_movie(1),
        make_movie(2, title="Amélie", overview="", poster_path="", vote_average=0.0),
        make_movie(3, title="千と千尋の神隠し", vote_average=10.0, release_date=""),
    ],
)
def test_round_trip(movie):
    assert decode_record(encode(movie)) == movie


def test_decode_accepts_single_encoded_movie():
    movie = make_movie(5, title="Paprika", original_language="ja")
    assert decode(encode(movie)) == [movie]
