from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import ContactMessageViewSet, SiteSettingsView

router = SimpleRouter()
router.register(r'messages', ContactMessageViewSet, basename='message')

urlpatterns = [
    path('settings/', SiteSettingsView.as_view(), name='site-settings'),
    path('', include(router.urls)),
]
