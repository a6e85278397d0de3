"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 2 users (admin, alice)
- A collection of bottles for alice, some opened with drinking history
- Wishlist items
- Notification preferences with reminders enabled
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal
from datetime import date, timedelta

from apps.accounts.models import User
from apps.bottles.models import Bottle
from apps.bottles.services import create_bottle, record_consumption, consume_standard_pour
from apps.notifications.services import update_preferences, request_reschedule
from apps.wishlist.models import WishlistItem
from apps.wishlist.services import create_item

SAMPLE_BOTTLES = [
    {
        'name': 'Lagavulin 16',
        'distillery': 'Lagavulin',
        'region': 'Islay',
        'type': 'Single Malt',
        'abv': 43.0,
        'purchase_price': Decimal('89.00'),
        'purchase_place': 'Royal Mile Whiskies',
        'pours': [60, 45, 30],
    },
    {
        'name': 'Buffalo Trace',
        'distillery': 'Buffalo Trace',
        'region': 'Kentucky',
        'type': 'Bourbon',
        'abv': 45.0,
        'volume': 750,
        'purchase_price': Decimal('29.99'),
        'pours': [200, 200, 150, 120],
    },
    {
        'name': 'Yoichi Single Malt',
        'distillery': 'Nikka',
        'region': 'Hokkaido',
        'type': 'Single Malt',
        'abv': 45.0,
        'purchase_price': Decimal('110.00'),
        'pours': [],
    },
    {
        'name': 'Redbreast 12',
        'distillery': 'Midleton',
        'region': 'Cork',
        'type': 'Single Pot Still',
        'abv': 40.0,
        'pours': [30],
    },
    {
        'name': 'Rittenhouse Rye',
        'distillery': 'Heaven Hill',
        'region': 'Kentucky',
        'type': 'Rye',
        'abv': 50.0,
        'volume': 750,
        'purchase_price': Decimal('34.50'),
        'pours': [],
    },
]

SAMPLE_WISHLIST = [
    {'name': 'Springbank 15', 'distillery': 'Springbank', 'priority': 5, 'budget': Decimal('120.00')},
    {'name': 'Hibiki 17', 'distillery': 'Suntory', 'priority': 4, 'target_price': Decimal('450.00')},
    {'name': 'Ardbeg Uigeadail', 'distillery': 'Ardbeg', 'priority': 2, 'target_price': Decimal('75.00')},
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_collection(users['alice'])
        self.create_wishlist(users['alice'])

        update_preferences(user=users['alice'], data={
            'notifications_enabled': True,
            'notify_at_30_days': True,
        })
        request_reschedule(users['alice'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123')

    def clear_data(self):
        """Clear all data from the database."""
        Bottle.objects.all().delete()
        WishlistItem.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'display_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        alice, _ = User.objects.get_or_create(
            email='alice@example.com',
            defaults={'display_name': 'Alice'}
        )
        alice.set_password('password123')
        alice.save()

        return {'admin': admin, 'alice': alice}

    def create_collection(self, owner):
        self.stdout.write('  Creating bottles...')

        for offset, sample in enumerate(SAMPLE_BOTTLES):
            fields = dict(sample)
            pours = fields.pop('pours')
            bottle = create_bottle(
                owner=owner,
                purchase_date=date.today() - timedelta(days=30 * (offset + 1)),
                **fields
            )
            for volume in pours:
                record_consumption(bottle=bottle, volume_ml=volume)
            if pours:
                consume_standard_pour(bottle=bottle)

    def create_wishlist(self, owner):
        self.stdout.write('  Creating wishlist...')

        for sample in SAMPLE_WISHLIST:
            create_item(owner=owner, **sample)
