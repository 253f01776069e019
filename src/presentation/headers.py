from typing import Dict, Mapping

MEDIA_RESPONSE_HEADERS = {
	"access-control-allow-origin": "*",
	"access-control-allow-methods": "GET, HEAD, OPTIONS",
	"cache-control": "public, max-age=31536000, immutable",
}

# Belong to the upstream connection, the ASGI server sets its own
HOP_BY_HOP_HEADERS = frozenset({
	"connection",
	"keep-alive",
	"proxy-authenticate",
	"proxy-authorization",
	"te",
	"trailer",
	"transfer-encoding",
	"upgrade",
})


def merge_response_headers(upstream_headers: Mapping[str, str]) -> Dict[str, str]:
	"""Upstream headers with the CORS and cache overrides upserted.

	Repeated upstream headers arrive already joined with ", " (httpx.Headers.items()).
	"""
	merged: Dict[str, str] = {}
	for name, value in upstream_headers.items():
		key = name.lower()
		if key in HOP_BY_HOP_HEADERS:
			continue
		merged[key] = value
	merged.update(MEDIA_RESPONSE_HEADERS)
	return merged
