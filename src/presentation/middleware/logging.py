import logging
import time
from fastapi import Request

logger = logging.getLogger("media_access")


async def log_request_middleware(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s%s %s %.1fms",
        request.method,
        request.url.path,
        f"?{request.url.query}" if request.url.query else "",
        response.status_code,
        elapsed_ms,
    )
    return response
