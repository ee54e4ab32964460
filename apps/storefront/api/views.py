import logging

from rest_framework import generics, mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.storefront.models import ContactMessage, SiteSettings
from .serializers import ContactMessageSerializer, SiteSettingsSerializer

logger = logging.getLogger(__name__)


class SiteSettingsView(generics.RetrieveUpdateAPIView):
    """
    API endpoint for the site settings.

    get: Public, used by every page (footer, contact details)
    put/patch: Staff only
    """
    serializer_class = SiteSettingsSerializer

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAdminUser()]

    def get_object(self):
        return SiteSettings.load()

    def perform_update(self, serializer):
        serializer.save()
        logger.info("Site settings updated by %s: %s",
                    self.request.user, sorted(serializer.validated_data))


class ContactMessageViewSet(mixins.CreateModelMixin,
                            mixins.ListModelMixin,
                            mixins.RetrieveModelMixin,
                            viewsets.GenericViewSet):
    """
    API endpoint for contact messages.

    create: Public contact form submission
    list/retrieve: Staff only
    """
    queryset = ContactMessage.objects.all()
    serializer_class = ContactMessageSerializer

    def get_permissions(self):
        if self.action == 'create':
            return [permissions.AllowAny()]
        return [permissions.IsAdminUser()]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = serializer.save()
        logger.info("Contact message %s received from %s", message.pk, message.email)
        return Response(
            {'success': True, 'id': message.pk},
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['post'])
    def mark_read(self, request, pk=None):
        """Mark a message as read."""
        message = self.get_object()
        if not message.is_read:
            message.is_read = True
            message.save(update_fields=['is_read'])
        return Response({'id': message.pk, 'is_read': True})
