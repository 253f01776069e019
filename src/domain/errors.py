from __future__ import annotations
from typing import Optional


class PathNotServedError(Exception):
	"""The request path lies outside the proxied prefix"""

	def __init__(self, path: str, prefix: str):
		super().__init__(f"Path {path!r} is outside of {prefix!r}")
		self.path = path
		self.prefix = prefix


class MirrorFetchError(Exception):
	"""Transport-level failure while talking to the delivery mirror"""

	def __init__(self, message: str, url: str, method: str = "GET", attempt: Optional[str] = None):
		super().__init__(message)
		self.message = message
		self.url = url
		self.method = method
		self.attempt = attempt
