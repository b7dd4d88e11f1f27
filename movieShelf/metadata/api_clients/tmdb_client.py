from __future__ import annotations

import os
from typing import List, Optional

import requests

from movieShelf.errors import ConfigError, DecodeError, NetworkError
from movieShelf.metadata.core.codec import decode
from movieShelf.metadata.core.models import MovieRecord
from movieShelf.settings import CATALOG_BASE_URL, REQUEST_TIMEOUT, TOKEN_ENV_VAR
from movieShelf.utils import log_debug


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) popular-movies endpoint."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, base_url: str | None = None):
        self.base_url = (base_url or CATALOG_BASE_URL).rstrip("/")

    @staticmethod
    def _token(bearer_token: str | None) -> str:
        # read at call time so a token exported after start-up is picked up
        token = bearer_token or os.getenv(TOKEN_ENV_VAR)
        if not token:
            raise ConfigError(f"{TOKEN_ENV_VAR} is not set")
        return token

    def _get(self, path: str, token: str) -> requests.Response:
        try:
            resp = requests.get(
                f"{self.base_url}{path}",
                headers={"Authorization": f"Bearer {token}"},
                timeout=REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"GET {path} failed: {exc}") from exc
        return resp

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def fetch_popular(self, bearer_token: str | None = None) -> Optional[List[MovieRecord]]:
        """
        Return page one of TMDb's popular movies.

        • Token comes from *bearer_token* or the environment, read now
        • Any failure (no token, bad URL, transport, HTTP status, bad JSON)
          is logged and yields None; a successful empty page is []
        """
        try:
            resp = self._get("/movie/popular", self._token(bearer_token))
            movies = decode(resp.content)
        except ConfigError as exc:
            log_debug(f"TMDb → access token not found: {exc}")
            return None
        except NetworkError as exc:
            log_debug(f"TMDb → {exc}")
            return None
        except DecodeError as exc:
            log_debug(f"TMDb → decoding failed: {exc}")
            return None

        log_debug(f"TMDb → {len(movies)} popular movies")
        return movies


client = TMDBClient()
