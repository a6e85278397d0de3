"""
Statistics Module
=================

In-memory aggregation over a snapshot of a user's collection.

Classes:
    CollectionStatistics: Counts, sums, averages, type distribution,
        consumption buckets, trend and cost performance.

The aggregator never touches the database. Callers load the bottles and
drinking logs and hand them over through ``refresh``; any object exposing
the Bottle / DrinkingLog attributes works, including unsaved model
instances.

Example:
    Building the statistics for a user::

        from apps.analytics.statistics import CollectionStatistics

        stats = CollectionStatistics()
        stats.refresh(
            bottles=Bottle.objects.filter(owner=user),
            logs=DrinkingLog.objects.filter(bottle__owner=user),
        )
        print(stats.total_bottles, stats.average_abv)
        print(stats.monthly_consumption)

Note:
    Consumption buckets compare whole calendar days: a log belongs to a
    bucket when its local date lies between the first and last day of the
    period, both inclusive.
"""

from collections import Counter
from datetime import date, datetime, timedelta
from decimal import Decimal

from django.utils import timezone

from .exceptions import InvalidPeriodError

PERIOD_MONTH = 'month'
PERIOD_YEAR = 'year'

DEFAULT_PERIOD_COUNTS = {
    PERIOD_MONTH: 6,
    PERIOD_YEAR: 5,
}

UNKNOWN_TYPE = 'Unknown'


def _local_date(value):
    """Calendar date of a date/datetime in the current time zone."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


def _shift_month(year, month, offset):
    """Return (year, month) moved by offset months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def _full_months_between(start, end):
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if (end.day, end.time()) < (start.day, start.time()):
        months -= 1
    return months


def _full_years_between(start, end):
    years = end.year - start.year
    if (end.month, end.day, end.time()) < (start.month, start.day, start.time()):
        years -= 1
    return years


def _period_bounds(reference, period, offset):
    """
    First day, last day and label of the period `offset` steps before reference.

    Months are labelled "M月", years "YYYY年".
    """
    if period == PERIOD_MONTH:
        year, month = _shift_month(reference.year, reference.month, -offset)
        start = date(year, month, 1)
        next_year, next_month = _shift_month(year, month, 1)
        end = date(next_year, next_month, 1) - timedelta(days=1)
        return start, end, f"{month}月"

    if period == PERIOD_YEAR:
        year = reference.year - offset
        return date(year, 1, 1), date(year, 12, 31), f"{year}年"

    raise InvalidPeriodError(
        f"Invalid period: {period!r}. Valid options: {PERIOD_MONTH}, {PERIOD_YEAR}"
    )


class CollectionStatistics:
    """
    Aggregated view of one collection.

    Holds the last snapshot passed to ``refresh``; every property is
    recomputed from it on access.

    Attributes:
        bottles (list): Bottles of the snapshot.
        logs (list): Drinking logs of the snapshot.
        now (datetime | None): Fixed "current time", or None for the real clock.
    """

    def __init__(self, bottles=(), logs=(), now=None):
        self.now = now
        self.bottles = []
        self.logs = []
        self.refresh(bottles, logs)

    def refresh(self, bottles, logs):
        """Replace the snapshot."""
        self.bottles = list(bottles)
        self.logs = list(logs)
        return self

    def _current_time(self):
        return self.now or timezone.now()

    # ------------------------------------------------------------------
    # Counts and sums
    # ------------------------------------------------------------------

    @property
    def total_bottles(self):
        return len(self.bottles)

    @property
    def opened_bottles(self):
        return sum(1 for bottle in self.bottles if bottle.is_opened)

    @property
    def unopened_bottles(self):
        return self.total_bottles - self.opened_bottles

    @property
    def opened_percentage(self):
        if not self.bottles:
            return 0.0
        return self.opened_bottles / self.total_bottles * 100

    @property
    def total_investment(self):
        """Sum of purchase prices; bottles without a price count as zero."""
        return sum(
            (bottle.purchase_price for bottle in self.bottles if bottle.purchase_price is not None),
            Decimal('0')
        )

    @property
    def total_remaining_volume(self):
        return sum(bottle.remaining_volume for bottle in self.bottles)

    # ------------------------------------------------------------------
    # Averages
    # ------------------------------------------------------------------

    @property
    def average_abv(self):
        if not self.bottles:
            return 0.0
        return sum(bottle.abv for bottle in self.bottles) / len(self.bottles)

    @property
    def average_remaining_percentage(self):
        """Mean remaining percentage over opened bottles only."""
        opened = [bottle for bottle in self.bottles if bottle.is_opened]
        if not opened:
            return 0.0
        return sum(bottle.remaining_percentage for bottle in opened) / len(opened)

    # ------------------------------------------------------------------
    # Distribution
    # ------------------------------------------------------------------

    @property
    def type_distribution(self):
        """
        (type, count) pairs, most common first.

        Ties keep the order in which the types first appear in the
        snapshot. Blank types are grouped as "Unknown".
        """
        counts = Counter(bottle.type or UNKNOWN_TYPE for bottle in self.bottles)
        # Counter preserves insertion order and sorted() is stable
        return sorted(counts.items(), key=lambda item: item[1], reverse=True)

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def consumption_data(self, period=PERIOD_MONTH, count=None):
        """
        Consumed volume per period for the last `count` periods.

        Args:
            period (str): 'month' or 'year'.
            count (int, optional): Number of periods, defaults to 6 months
                or 5 years.

        Returns:
            list[tuple[str, int]]: (label, volume) pairs, oldest first,
            ending with the current period.

        Raises:
            InvalidPeriodError: If period is not supported.
        """
        if period not in DEFAULT_PERIOD_COUNTS:
            raise InvalidPeriodError(
                f"Invalid period: {period!r}. Valid options: {PERIOD_MONTH}, {PERIOD_YEAR}"
            )
        if count is None:
            count = DEFAULT_PERIOD_COUNTS[period]

        today = _local_date(self._current_time())
        log_dates = [(_local_date(log.date), log.volume) for log in self.logs if log.date is not None]

        data = []
        for offset in range(count - 1, -1, -1):
            start, end, label = _period_bounds(today, period, offset)
            volume = sum(v for day, v in log_dates if start <= day <= end)
            data.append((label, volume))
        return data

    @property
    def monthly_consumption(self):
        return self.consumption_data(PERIOD_MONTH)

    @property
    def yearly_consumption(self):
        return self.consumption_data(PERIOD_YEAR)

    def consumption_trend_stats(self, data, period=PERIOD_MONTH):
        """
        Total and per-period average of a consumption series.

        The average divides by the number of periods since the first
        recorded pour (full months/years elapsed, plus one) rather than by
        the number of buckets, using integer division. Without any logs the
        average equals the total.

        Returns:
            dict: {'total': int, 'average': int}
        """
        total = sum(volume for _, volume in data)

        dated = [log.date for log in self.logs if log.date is not None]
        if not dated:
            return {'total': total, 'average': total}

        first = min(dated)
        now = self._current_time()
        if timezone.is_aware(first) and timezone.is_aware(now):
            first, now = timezone.localtime(first), timezone.localtime(now)

        if period == PERIOD_MONTH:
            elapsed = _full_months_between(first, now)
        elif period == PERIOD_YEAR:
            elapsed = _full_years_between(first, now)
        else:
            raise InvalidPeriodError(
                f"Invalid period: {period!r}. Valid options: {PERIOD_MONTH}, {PERIOD_YEAR}"
            )

        actual_periods = max(1, elapsed + 1)
        return {'total': total, 'average': total // actual_periods}

    # ------------------------------------------------------------------
    # Cost performance
    # ------------------------------------------------------------------

    @property
    def cost_performance(self):
        """(bottle, price per ml) for priced bottles, cheapest per ml first."""
        priced = [
            (bottle, Decimal(bottle.purchase_price) / Decimal(bottle.volume))
            for bottle in self.bottles
            if bottle.purchase_price is not None and bottle.volume > 0
        ]
        return sorted(priced, key=lambda item: item[1])

    # ------------------------------------------------------------------
    # Presentation helpers
    # ------------------------------------------------------------------

    @property
    def has_bottles(self):
        return bool(self.bottles)

    @property
    def has_type_distribution(self):
        return bool(self.type_distribution)

    def has_consumption_data(self, period=PERIOD_MONTH):
        return any(volume > 0 for _, volume in self.consumption_data(period))

    @property
    def has_cost_performance_data(self):
        return bool(self.cost_performance)

    def as_dict(self, period=PERIOD_MONTH, count=None):
        """Render every statistic as plain data for the API."""
        consumption = self.consumption_data(period, count)
        return {
            'total_bottles': self.total_bottles,
            'opened_bottles': self.opened_bottles,
            'unopened_bottles': self.unopened_bottles,
            'opened_percentage': self.opened_percentage,
            'total_investment': self.total_investment,
            'total_remaining_volume': self.total_remaining_volume,
            'average_abv': self.average_abv,
            'average_remaining_percentage': self.average_remaining_percentage,
            'type_distribution': [
                {'type': bottle_type, 'count': count}
                for bottle_type, count in self.type_distribution
            ],
            'period': period,
            'consumption': [
                {'label': label, 'volume': volume}
                for label, volume in consumption
            ],
            'trend': self.consumption_trend_stats(consumption, period),
            'cost_performance': [
                {'bottle_id': bottle.id, 'name': bottle.name, 'price_per_ml': price}
                for bottle, price in self.cost_performance
            ],
            'has_bottles': self.has_bottles,
            'has_consumption_data': any(volume > 0 for _, volume in consumption),
        }
