from .delivery import HostingMethod, DeliveryMirror, BASE_URL_TEMPLATES
from .media import MediaRequest, RawHeaders

__all__ = [
	"HostingMethod",
	"DeliveryMirror",
	"BASE_URL_TEMPLATES",
	"MediaRequest",
	"RawHeaders",
]
