from .media_fetcher import MediaFetcher, UpstreamResponse

__all__ = [
	"MediaFetcher",
	"UpstreamResponse",
]
