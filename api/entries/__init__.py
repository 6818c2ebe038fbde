"""
Whole-entry reads: today in history, tag and text search, the entry page.
"""
