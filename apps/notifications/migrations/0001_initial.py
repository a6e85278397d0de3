# Generated manually for the notifications app

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='NotificationPreferences',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('notifications_enabled', models.BooleanField(default=False)),
                ('low_stock_threshold', models.FloatField(default=10.0, validators=[MinValueValidator(0.0), MaxValueValidator(100.0)])),
                ('notify_at_30_days', models.BooleanField(default=False)),
                ('notify_at_60_days', models.BooleanField(default=False)),
                ('notify_at_90_days', models.BooleanField(default=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='notification_preferences', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'notification_preferences',
                'verbose_name_plural': 'notification preferences',
            },
        ),
        migrations.CreateModel(
            name='ScheduledReminder',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('identifier', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('LOW_STOCK', 'Low stock'), ('AGE_NOTIFICATION', 'Days since opened')], max_length=30)),
                ('trigger_type', models.CharField(choices=[('interval', 'Relative interval'), ('calendar', 'Calendar date')], max_length=20)),
                ('fire_at', models.DateTimeField()),
                ('title', models.CharField(max_length=200)),
                ('body', models.TextField(blank=True)),
                ('payload', models.JSONField(blank=True, default=dict)),
                ('bottle_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scheduled_reminders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'scheduled_reminders',
                'ordering': ['fire_at'],
                'unique_together': {('user', 'identifier')},
                'indexes': [models.Index(fields=['user', 'fire_at'], name='reminders_user_fire_at_idx')],
            },
        ),
    ]
