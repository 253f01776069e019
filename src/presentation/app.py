import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from core.config import settings
from presentation.middleware.logging import log_request_middleware
from presentation.routers.media_proxy import router as media_proxy_router, container


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger = logging.getLogger("startup")
	logger.info(
		"Serving %s from %s (hosting method: %s, fallback root: %s)",
		settings.proxy.path_prefix,
		container.mirror.base_url,
		container.mirror.hosting_method.value,
		settings.proxy.fallback_root,
	)

	yield

	await container.mirror_client.aclose()


def create_app() -> FastAPI:
	# Every path belongs to the proxy, so no docs/openapi routes
	app = FastAPI(
		title="media-mirror-proxy",
		lifespan=lifespan,
		docs_url=None,
		redoc_url=None,
		openapi_url=None,
	)
	app.middleware("http")(log_request_middleware)
	app.include_router(media_proxy_router)
	return app
