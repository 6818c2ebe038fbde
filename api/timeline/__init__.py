"""
Aggregates over publication dates: per month, per year, one month's entries.
"""
