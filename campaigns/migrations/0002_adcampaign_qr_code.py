from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    dependencies = [
        ('campaigns', '0001_initial'),
        ('qrcodes', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='adcampaign',
            name='qr_code',
            field=models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='linked_campaign', to='qrcodes.qrcode'),
        ),
    ]
