from rest_framework import serializers
from apps.storefront.models import ContactMessage, SiteSettings


class SiteSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = SiteSettings
        fields = [
            'site_name', 'logo_url', 'site_description', 'site_keywords',
            'contact_email', 'contact_phone', 'contact_address',
            'social_facebook', 'social_twitter', 'social_instagram', 'social_youtube',
            'footer_text', 'about_text', 'our_story', 'our_mission',
            'why_choose_us', 'privacy_policy', 'terms_of_service',
            'updated_at'
        ]
        read_only_fields = ['updated_at']


class ContactMessageSerializer(serializers.ModelSerializer):
    """Contact form submission; name, email and message are required."""

    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'subject', 'message', 'is_read', 'created_at']
        read_only_fields = ['id', 'is_read', 'created_at']

