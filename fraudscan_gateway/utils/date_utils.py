"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def last_n_days(today: date, days: int) -> List[date]:
    """The `days` calendar days ending with `today`, oldest first"""
    if days <= 0:
        return []
    return generate_date_range(today - timedelta(days=days - 1), today)
