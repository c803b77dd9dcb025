"""
Domain models and value objects.

Contains Duration, Period, PeriodType and the duration field kinds.
"""
