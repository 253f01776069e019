from .settings_to_domain import mirror_from_settings

__all__ = [
	"mirror_from_settings",
]
