from __future__ import annotations
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field

BODYLESS_METHODS = frozenset({"GET", "HEAD"})

# Header pairs exactly as received, repeats and non-ASCII bytes included
RawHeaders = List[Tuple[bytes, bytes]]


class MediaRequest(BaseModel):
	"""Inbound request as seen by the proxy, alive for one fetch cycle"""

	method: str
	# Raw path, still percent-encoded as received
	path: str
	query: str = ""
	headers: RawHeaders = Field(default_factory=list)
	body: Optional[bytes] = None

	@property
	def forwarded_body(self) -> Optional[bytes]:
		if self.method.upper() in BODYLESS_METHODS:
			return None
		return self.body or None
