"""
metadata.core
~~~~~~~~~~~~~
Domain layer – record dataclass, wire codec & favorites repository.
"""

from .models import MovieRecord
from .codec  import decode, decode_record, encode
from .repo   import FavoritesRepo

__all__ = ["MovieRecord", "decode", "decode_record", "encode", "FavoritesRepo"]
