import logging

from core.config import MirrorSettings
from domain.models import DeliveryMirror, HostingMethod

logger = logging.getLogger("media_proxy.use_cases")


def mirror_from_settings(settings: MirrorSettings) -> DeliveryMirror:
	hosting_method = HostingMethod.parse(settings.hosting_method)
	if hosting_method is None:
		logger.warning(
			"Unknown hosting method %r, falling back to %s",
			settings.hosting_method,
			HostingMethod.cdn.value,
		)
		hosting_method = HostingMethod.cdn
	return DeliveryMirror(
		username=settings.username,
		repository=settings.repository,
		branch=settings.branch,
		hosting_method=hosting_method,
	)
