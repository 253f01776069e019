import logging
from typing import Optional

import httpx
from core.config import MirrorSettings
from domain.errors import MirrorFetchError
from domain.models import RawHeaders
from domain.ports.media_fetcher import MediaFetcher

# Managed by httpx itself for every outbound request
CLIENT_MANAGED_HEADERS = frozenset({
	b"host",
	b"content-length",
	b"connection",
	b"keep-alive",
	b"proxy-authenticate",
	b"proxy-authorization",
	b"te",
	b"trailer",
	b"transfer-encoding",
	b"upgrade",
})


class MirrorHttpClient(MediaFetcher):
	def __init__(self, settings: MirrorSettings):
		self._logger = logging.getLogger("mirror")
		self._client = httpx.AsyncClient(
			follow_redirects=True,
			timeout=settings.timeout,
		)
		self._logger.info("Mirror client initialized timeout=%s", settings.timeout)

	async def open(
		self,
		method: str,
		url: str,
		headers: RawHeaders,
		body: Optional[bytes] = None,
	) -> httpx.Response:
		# Raw pairs keep repeated headers and non-ASCII values intact
		outbound = [
			(name, value)
			for name, value in headers
			if name.lower() not in CLIENT_MANAGED_HEADERS
		]
		try:
			request = self._client.build_request(method, url, headers=outbound, content=body)
			response = await self._client.send(request, stream=True)
		except (httpx.RequestError, httpx.InvalidURL) as e:
			raise MirrorFetchError(str(e) or type(e).__name__, url=url, method=method) from e
		self._logger.debug(
			"%s %s status=%s content_type=%s",
			method,
			url,
			response.status_code,
			response.headers.get("Content-Type"),
		)
		return response

	async def aclose(self) -> None:
		await self._client.aclose()
