from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class HostingMethod(str, Enum):
	raw = "raw"
	pages = "pages"
	cdn = "cdn"

	@classmethod
	def parse(cls, value: Optional[str]) -> Optional["HostingMethod"]:
		"""Return the matching method, or None when the value is not recognised"""
		if value == "jsdelivr":
			return cls.cdn
		try:
			return cls(value)
		except ValueError:
			return None


BASE_URL_TEMPLATES = {
	HostingMethod.raw: "https://raw.githubusercontent.com/{username}/{repository}/{branch}",
	HostingMethod.pages: "https://{username}.github.io/{repository}",
	HostingMethod.cdn: "https://cdn.jsdelivr.net/gh/{username}/{repository}@{branch}",
}


class DeliveryMirror(BaseModel):
	"""Version-controlled artifact mirror that actually serves the media bytes"""

	model_config = ConfigDict(frozen=True)

	username: str
	repository: str
	branch: str
	hosting_method: HostingMethod = HostingMethod.cdn

	@property
	def base_url(self) -> str:
		template = BASE_URL_TEMPLATES[self.hosting_method]
		return template.format(
			username=self.username,
			repository=self.repository,
			branch=self.branch,
		)
