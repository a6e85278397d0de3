# Generated manually for the sync app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SyncState',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('container_id', models.CharField(max_length=200)),
                ('account_status', models.CharField(choices=[('available', 'Available'), ('no_account', 'No account'), ('restricted', 'Restricted'), ('unavailable', 'Temporarily unavailable'), ('could_not_determine', 'Could not determine')], default='could_not_determine', max_length=30)),
                ('schema_initialized', models.BooleanField(default=False)),
                ('schema_initialized_at', models.DateTimeField(blank=True, null=True)),
                ('last_checked_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='sync_state', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'sync_states',
            },
        ),
        migrations.CreateModel(
            name='SyncEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('kind', models.CharField(choices=[('setup', 'Setup'), ('import', 'Import'), ('export', 'Export'), ('error', 'Error'), ('info', 'Info')], default='info', max_length=20)),
                ('message', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sync_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'sync_events',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['user', 'created_at'], name='sync_events_user_created_idx')],
            },
        ),
    ]
