from django.db import models
from simple_history.models import HistoricalRecords


class SiteSettings(models.Model):
    """
    Site-wide settings edited from the admin panel.
    There is exactly one row; use SiteSettings.load().
    """
    SINGLETON_PK = 1

    # General
    site_name = models.CharField(max_length=200, blank=True, verbose_name='Site name')
    logo_url = models.URLField(max_length=1000, blank=True, verbose_name='Logo URL')
    site_description = models.TextField(blank=True, verbose_name='Site description')
    site_keywords = models.CharField(max_length=500, blank=True, verbose_name='SEO keywords')

    # Contact
    contact_email = models.EmailField(blank=True, verbose_name='Contact email')
    contact_phone = models.CharField(max_length=50, blank=True, verbose_name='Contact phone')
    contact_address = models.CharField(max_length=500, blank=True, verbose_name='Contact address')

    # Social
    social_facebook = models.URLField(blank=True, verbose_name='Facebook')
    social_twitter = models.URLField(blank=True, verbose_name='Twitter')
    social_instagram = models.URLField(blank=True, verbose_name='Instagram')
    social_youtube = models.URLField(blank=True, verbose_name='YouTube')

    # Content
    footer_text = models.TextField(blank=True, verbose_name='Footer text')
    about_text = models.TextField(blank=True, verbose_name='About')
    our_story = models.TextField(blank=True, verbose_name='Our story')
    our_mission = models.TextField(blank=True, verbose_name='Our mission')
    why_choose_us = models.TextField(blank=True, verbose_name='Why choose us')
    privacy_policy = models.TextField(blank=True, verbose_name='Privacy policy')
    terms_of_service = models.TextField(blank=True, verbose_name='Terms of service')

    updated_at = models.DateTimeField(auto_now=True, verbose_name='Updated at')

    history = HistoricalRecords()

    class Meta:
        verbose_name = 'Site settings'
        verbose_name_plural = 'Site settings'

    def __str__(self):
        return self.site_name or 'Site settings'

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        # The singleton row is never removed
        return 0, {}

    @classmethod
    def load(cls):
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj


class ContactMessage(models.Model):
    """Message sent through the contact form."""
    name = models.CharField(max_length=200, verbose_name='Name')
    email = models.EmailField(verbose_name='Email')
    subject = models.CharField(max_length=300, blank=True, verbose_name='Subject')
    message = models.TextField(verbose_name='Message')
    is_read = models.BooleanField(default=False, verbose_name='Read')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='Received at')

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Contact message'
        verbose_name_plural = 'Contact messages'

    def __str__(self):
        return f"{self.name} <{self.email}>: {self.subject or '(no subject)'}"
