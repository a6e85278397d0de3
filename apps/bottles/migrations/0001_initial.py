# Generated manually for the bottles app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Bottle',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('distillery', models.CharField(blank=True, max_length=200)),
                ('region', models.CharField(blank=True, max_length=100)),
                ('type', models.CharField(blank=True, max_length=100)),
                ('abv', models.FloatField(default=0.0, validators=[MinValueValidator(0.0), MaxValueValidator(100.0)])),
                ('volume', models.PositiveIntegerField(default=700)),
                ('remaining_volume', models.PositiveIntegerField(default=700)),
                ('purchase_date', models.DateField(blank=True, null=True)),
                ('purchase_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[MinValueValidator(Decimal('0.00'))])),
                ('purchase_place', models.CharField(blank=True, max_length=200)),
                ('opened_date', models.DateTimeField(blank=True, null=True)),
                ('rating', models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(5)])),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bottles', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'bottles',
                'ordering': ['-updated_at'],
                'indexes': [
                    models.Index(fields=['owner', 'updated_at'], name='bottles_owner_updated_idx'),
                    models.Index(fields=['owner', 'type'], name='bottles_owner_type_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='DrinkingLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('volume', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('bottle', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='drinking_logs', to='bottles.bottle')),
            ],
            options={
                'db_table': 'drinking_logs',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['bottle', 'date'], name='drinking_logs_bottle_date_idx'),
                    models.Index(fields=['date'], name='drinking_logs_date_idx'),
                ],
            },
        ),
    ]
