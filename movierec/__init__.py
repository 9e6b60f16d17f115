"""Genre-based movie recommendations.

Each movie's genres become a binary vector over the catalog's genre
vocabulary; candidates are ranked by cosine similarity to a chosen movie.
Average ratings annotate the results but never influence the ranking.
"""

from .data import Item, RatingRecord
from .errors import DimensionMismatchError, InvalidLimitError, RecommenderError
from .features import Vocabulary, build_vocabulary, vectorize
from .ratings import average_rating
from .recommender import DEFAULT_LIMIT, ScoredItem, recommend
from .similarity import cosine_similarity

__all__ = [
    "DEFAULT_LIMIT",
    "DimensionMismatchError",
    "InvalidLimitError",
    "Item",
    "RatingRecord",
    "RecommenderError",
    "ScoredItem",
    "Vocabulary",
    "average_rating",
    "build_vocabulary",
    "cosine_similarity",
    "recommend",
    "vectorize",
]
