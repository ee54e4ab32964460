# Generated manually

import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


SETTINGS_FIELDS = [
    ('site_name', models.CharField(blank=True, max_length=200, verbose_name='Site name')),
    ('logo_url', models.URLField(blank=True, max_length=1000, verbose_name='Logo URL')),
    ('site_description', models.TextField(blank=True, verbose_name='Site description')),
    ('site_keywords', models.CharField(blank=True, max_length=500, verbose_name='SEO keywords')),
    ('contact_email', models.EmailField(blank=True, max_length=254, verbose_name='Contact email')),
    ('contact_phone', models.CharField(blank=True, max_length=50, verbose_name='Contact phone')),
    ('contact_address', models.CharField(blank=True, max_length=500, verbose_name='Contact address')),
    ('social_facebook', models.URLField(blank=True, verbose_name='Facebook')),
    ('social_twitter', models.URLField(blank=True, verbose_name='Twitter')),
    ('social_instagram', models.URLField(blank=True, verbose_name='Instagram')),
    ('social_youtube', models.URLField(blank=True, verbose_name='YouTube')),
    ('footer_text', models.TextField(blank=True, verbose_name='Footer text')),
    ('about_text', models.TextField(blank=True, verbose_name='About')),
    ('our_story', models.TextField(blank=True, verbose_name='Our story')),
    ('our_mission', models.TextField(blank=True, verbose_name='Our mission')),
    ('why_choose_us', models.TextField(blank=True, verbose_name='Why choose us')),
    ('privacy_policy', models.TextField(blank=True, verbose_name='Privacy policy')),
    ('terms_of_service', models.TextField(blank=True, verbose_name='Terms of service')),
]


def settings_fields():
    # Field instances are bound to one model each
    return [(name, field.clone()) for name, field in SETTINGS_FIELDS]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ContactMessage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('email', models.EmailField(max_length=254, verbose_name='Email')),
                ('subject', models.CharField(blank=True, max_length=300, verbose_name='Subject')),
                ('message', models.TextField(verbose_name='Message')),
                ('is_read', models.BooleanField(default=False, verbose_name='Read')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Received at')),
            ],
            options={
                'verbose_name': 'Contact message',
                'verbose_name_plural': 'Contact messages',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *settings_fields(),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
            ],
            options={
                'verbose_name': 'Site settings',
                'verbose_name_plural': 'Site settings',
            },
        ),
        migrations.CreateModel(
            name='HistoricalSiteSettings',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                *settings_fields(),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'historical Site settings',
                'verbose_name_plural': 'historical Site settings',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
