"""
Path translation from the public media URL space to the delivery mirror.

/uploads/2020/01/image.jpg -> <base_url>/2020/01/image.jpg
Nothing here normalises the path: what remains after the prefix is passed on as is.
"""
from __future__ import annotations
from typing import Optional


def relative_path(path: str, prefix: str) -> Optional[str]:
	"""Strip the served prefix once; None when the path is not served"""
	if not path.startswith(prefix):
		return None
	return path[len(prefix):]


def join_url(base: str, path: str) -> str:
	"""Join with exactly one slash at the seam"""
	if base.endswith("/"):
		base = base[:-1]
	if path.startswith("/"):
		path = path[1:]
	return f"{base}/{path}"


def with_query(url: str, query: str) -> str:
	if not query:
		return url
	return f"{url}?{query}"


def build_target_url(base_url: str, rel_path: str, query: str = "") -> str:
	return with_query(join_url(base_url, rel_path), query)


def build_fallback_url(base_url: str, fallback_root: str, full_path: str, query: str = "") -> str:
	"""Alternate layout where the mirror keeps the whole wp-content/uploads tree"""
	return with_query(join_url(base_url, join_url(fallback_root, full_path)), query)
