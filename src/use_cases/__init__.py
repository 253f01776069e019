from .fetch_media import FetchMediaUseCase
from .rewrite_path import (
	relative_path,
	join_url,
	build_target_url,
	build_fallback_url,
)

__all__ = [
	"FetchMediaUseCase",
	"relative_path",
	"join_url",
	"build_target_url",
	"build_fallback_url",
]
