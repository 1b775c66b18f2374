# engine/exceptions.py

class AnalyticsError(Exception):
    pass


class SeriesLengthMismatch(AnalyticsError, ValueError):
    pass
