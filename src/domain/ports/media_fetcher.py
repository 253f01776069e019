from __future__ import annotations
from typing import AsyncIterator, List, Mapping, Optional, Protocol, Tuple


class UpstreamResponse(Protocol):
	"""Streamed response from the mirror; must be closed by whoever consumes it"""

	status_code: int
	reason_phrase: str

	@property
	def headers(self) -> Mapping[str, str]: ...

	def aiter_raw(self) -> AsyncIterator[bytes]: ...

	async def aclose(self) -> None: ...


class MediaFetcher(Protocol):
	async def open(
		self,
		method: str,
		url: str,
		headers: List[Tuple[bytes, bytes]],
		body: Optional[bytes] = None,
	) -> UpstreamResponse:
		"""Send the request and return the response with its body still unread.

		Raises MirrorFetchError on transport failures.
		"""
		...

	async def aclose(self) -> None: ...
