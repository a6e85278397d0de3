"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidPeriodError
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics errors.

    Views catch it to turn any analytics failure into a 400 response:

        try:
            data = stats.as_dict(period)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when a consumption period is not supported.

    Valid periods are: month, year.
    """

    pass
