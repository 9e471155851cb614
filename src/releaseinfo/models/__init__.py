from .movie import MovieRecord
