from django.contrib import admin
from django.shortcuts import redirect
from django.urls import reverse
from simple_history.admin import SimpleHistoryAdmin

from .models import ContactMessage, SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(SimpleHistoryAdmin):
    fieldsets = (
        ('General', {
            'fields': ('site_name', 'logo_url', 'site_description', 'site_keywords')
        }),
        ('Contact', {
            'fields': ('contact_email', 'contact_phone', 'contact_address')
        }),
        ('Social', {
            'fields': ('social_facebook', 'social_twitter', 'social_instagram', 'social_youtube')
        }),
        ('Pages', {
            'fields': (
                'footer_text', 'about_text', 'our_story', 'our_mission',
                'why_choose_us', 'privacy_policy', 'terms_of_service'
            ),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        # Straight to the single settings row
        obj = SiteSettings.load()
        return redirect(reverse('admin:storefront_sitesettings_change', args=[obj.pk]))


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'subject', 'is_read', 'created_at']
    list_filter = ['is_read', 'created_at']
    search_fields = ['name', 'email', 'subject', 'message']
    readonly_fields = ['name', 'email', 'subject', 'message', 'created_at']
    date_hierarchy = 'created_at'

    actions = ['mark_read', 'mark_unread']

    def has_add_permission(self, request):
        return False

    @admin.action(description='Mark selected messages as read')
    def mark_read(self, request, queryset):
        count = queryset.update(is_read=True)
        self.message_user(request, f'{count} messages marked as read.')

    @admin.action(description='Mark selected messages as unread')
    def mark_unread(self, request, queryset):
        count = queryset.update(is_read=False)
        self.message_user(request, f'{count} messages marked as unread.')
