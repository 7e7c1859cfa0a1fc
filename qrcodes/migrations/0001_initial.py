from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('campaigns', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='QRCode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('qr_code', models.CharField(max_length=64, unique=True)),
                ('qr_image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('qr_image_data', models.TextField(blank=True, null=True)),
                ('promo_title', models.CharField(max_length=255)),
                ('promo_description', models.TextField(blank=True, null=True)),
                ('promo_link', models.CharField(max_length=500)),
                ('promo_terms', models.TextField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('paused', 'Paused'), ('expired', 'Expired'), ('inactive', 'Inactive')], default='active', max_length=10)),
                ('expires_at', models.DateTimeField(blank=True, null=True)),
                ('max_scans', models.PositiveIntegerField(blank=True, null=True)),
                ('scans_count', models.PositiveIntegerField(default=0)),
                ('unique_scans_count', models.PositiveIntegerField(default=0)),
                ('redemptions_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='qr_codes', to='campaigns.adcampaign')),
            ],
            options={
                'verbose_name': 'QR code',
                'indexes': [
                    models.Index(fields=['campaign'], name='qrcode_campaign_idx'),
                    models.Index(fields=['status'], name='qrcode_status_idx'),
                    models.Index(fields=['created_at'], name='qrcode_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Engagement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('device_id', models.CharField(max_length=255)),
                ('scanned_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('status', models.CharField(choices=[('scanned', 'Scanned'), ('redeemed', 'Redeemed'), ('duplicate', 'Duplicate'), ('failed', 'Failed'), ('expired', 'Expired')], default='scanned', max_length=10)),
                ('redemption_code', models.CharField(blank=True, max_length=12, null=True, unique=True)),
                ('redeemed_at', models.DateTimeField(blank=True, null=True)),
                ('reason', models.TextField(blank=True, null=True)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('user_agent', models.TextField(blank=True, null=True)),
                ('magazine_barcode', models.CharField(blank=True, max_length=100, null=True)),
                ('city', models.CharField(blank=True, max_length=100, null=True)),
                ('region', models.CharField(blank=True, max_length=100, null=True)),
                ('country', models.CharField(blank=True, max_length=100, null=True)),
                ('latitude', models.FloatField(blank=True, null=True)),
                ('longitude', models.FloatField(blank=True, null=True)),
                ('metadata', models.JSONField(blank=True, null=True)),
                ('driver', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='qr_engagements', to=settings.AUTH_USER_MODEL)),
                ('qr_code', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='engagements', to='qrcodes.qrcode')),
            ],
            options={
                'ordering': ['-scanned_at'],
                'indexes': [
                    models.Index(fields=['qr_code', 'device_id'], name='engagement_qr_device_idx'),
                    models.Index(fields=['device_id'], name='engagement_device_idx'),
                    models.Index(fields=['scanned_at'], name='engagement_scanned_idx'),
                    models.Index(fields=['status'], name='engagement_status_idx'),
                ],
            },
        ),
    ]
