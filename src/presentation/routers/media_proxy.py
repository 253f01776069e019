import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse, StreamingResponse

from core.config import settings
from domain.errors import MirrorFetchError, PathNotServedError
from domain.models import MediaRequest
from domain.ports.media_fetcher import UpstreamResponse
from infrastructure.http_clients.mirror_client import MirrorHttpClient
from presentation.headers import merge_response_headers
from use_cases import FetchMediaUseCase
from use_cases.mappers import mirror_from_settings

router = APIRouter()

logger = logging.getLogger("media_proxy")

PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# --- DI Container ---
class Container:
	def __init__(self):
		self.mirror = mirror_from_settings(settings.mirror)
		self.mirror_client = MirrorHttpClient(settings=settings.mirror)
		self.fetch_media_uc = FetchMediaUseCase(
			fetcher=self.mirror_client,
			mirror=self.mirror,
			proxy_settings=settings.proxy,
			mirror_settings=settings.mirror,
			logger=logging.getLogger("media_proxy.use_cases"),
		)


container = Container()


def get_fetch_media_uc() -> FetchMediaUseCase:
	return container.fetch_media_uc


def _raw_path(request: Request) -> str:
	# raw_path keeps percent-encoding; some servers omit it
	raw_path = request.scope.get("raw_path")
	if not raw_path:
		return request.url.path
	return raw_path.split(b"?", 1)[0].decode("latin-1")


async def _to_media_request(request: Request) -> MediaRequest:
	body = None
	if request.method not in ("GET", "HEAD"):
		body = await request.body()
	return MediaRequest(
		method=request.method,
		path=_raw_path(request),
		query=request.scope.get("query_string", b"").decode("latin-1"),
		headers=list(request.headers.raw),
		body=body,
	)


def _relay(upstream: UpstreamResponse) -> StreamingResponse:
	async def body():
		try:
			async for chunk in upstream.aiter_raw():
				yield chunk
		finally:
			await upstream.aclose()

	return StreamingResponse(
		body(),
		status_code=upstream.status_code,
		headers=merge_response_headers(upstream.headers),
	)


@router.api_route("/{full_path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy_media(
	request: Request,
	fetch_uc: FetchMediaUseCase = Depends(get_fetch_media_uc),
):
	path = _raw_path(request)
	if not fetch_uc.is_served(path):
		return Response(status_code=404)

	media_request = await _to_media_request(request)
	try:
		upstream = await fetch_uc.execute(media_request)
	except PathNotServedError:
		return Response(status_code=404)
	except MirrorFetchError as e:
		logger.error("Upstream fetch failed for %s: %s", path, e.message)
		return PlainTextResponse(f"Error fetching from mirror: {e.message}", status_code=500)

	return _relay(upstream)
