from .serializers import ContactMessageSerializer, SiteSettingsSerializer

__all__ = [
    'ContactMessageSerializer',
    'SiteSettingsSerializer',
]
