import logging
from typing import Optional

from core.config import MirrorSettings, ProxySettings
from core.error_logger import get_error_reporter
from domain.errors import MirrorFetchError, PathNotServedError
from domain.models import DeliveryMirror, MediaRequest, RawHeaders
from domain.ports.media_fetcher import MediaFetcher, UpstreamResponse
from use_cases.rewrite_path import build_fallback_url, build_target_url, relative_path


class FetchMediaUseCase:
	def __init__(
		self,
		fetcher: MediaFetcher,
		mirror: DeliveryMirror,
		proxy_settings: ProxySettings,
		mirror_settings: MirrorSettings,
		logger: logging.Logger | None = None,
	) -> None:
		self._fetcher = fetcher
		self._base_url = mirror.base_url
		self._prefix = proxy_settings.path_prefix
		self._fallback_root = proxy_settings.fallback_root
		self._user_agent = mirror_settings.user_agent
		self._logger = logger or logging.getLogger(__name__)

	@property
	def base_url(self) -> str:
		return self._base_url

	def is_served(self, path: str) -> bool:
		return relative_path(path, self._prefix) is not None

	def target_url(self, request: MediaRequest) -> str:
		rel_path = relative_path(request.path, self._prefix)
		if rel_path is None:
			raise PathNotServedError(request.path, self._prefix)
		return build_target_url(self._base_url, rel_path, request.query)

	def fallback_url(self, request: MediaRequest) -> str:
		return build_fallback_url(self._base_url, self._fallback_root, request.path, request.query)

	def _outbound_headers(self, headers: RawHeaders) -> RawHeaders:
		outbound = [(name, value) for name, value in headers if name.lower() != b"user-agent"]
		outbound.append((b"user-agent", self._user_agent.encode("latin-1")))
		return outbound

	async def _fetch(
		self,
		request: MediaRequest,
		url: str,
		body: Optional[bytes],
		attempt: str,
	) -> UpstreamResponse:
		try:
			response = await self._fetcher.open(
				request.method,
				url,
				headers=self._outbound_headers(request.headers),
				body=body,
			)
		except MirrorFetchError as e:
			e.attempt = attempt
			self._logger.warning("%s fetch %s %s failed: %s", attempt, request.method, url, e.message)
			try:
				get_error_reporter().log_fetch_error(
					error=e,
					method=request.method,
					url=url,
					attempt=attempt,
				)
			except RuntimeError as report_error:
				self._logger.debug("Error report skipped: %s", report_error)
			raise
		self._logger.debug("%s fetch %s %s -> %s", attempt, request.method, url, response.status_code)
		return response

	async def execute(self, request: MediaRequest) -> UpstreamResponse:
		"""Fetch the media from the mirror, trying the alternate layout once on 404.

		The returned response is still streaming; the caller closes it.
		"""
		url = self.target_url(request)
		response = await self._fetch(request, url, request.forwarded_body, attempt="primary")
		if response.status_code != 404:
			return response

		alt_url = self.fallback_url(request)
		try:
			alt_response = await self._fetch(request, alt_url, None, attempt="fallback")
		except MirrorFetchError:
			await response.aclose()
			raise

		if alt_response.status_code == 200:
			self._logger.info("Served %s from fallback %s", request.path, alt_url)
			await response.aclose()
			return alt_response

		self._logger.info(
			"Not found on mirror: %s (fallback %s -> %s)",
			url,
			alt_url,
			alt_response.status_code,
		)
		await alt_response.aclose()
		return response
