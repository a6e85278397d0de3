# Generated manually for the bottles app

from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('bottles', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='bottle',
            name='volume',
            field=models.PositiveIntegerField(default=700, validators=[MinValueValidator(1)]),
        ),
    ]
