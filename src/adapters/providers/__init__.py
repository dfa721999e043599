"""Provider adapters (one module per external data service).

Each class implements a protocol from `core.interfaces.providers`.
"""

from adapters.providers.omdb import OmdbMovieProvider
from adapters.providers.spotify import SpotifySearchProvider
from adapters.providers.twitter import TwitterTimelineProvider

__all__ = [
	"OmdbMovieProvider",
	"SpotifySearchProvider",
	"TwitterTimelineProvider",
]
