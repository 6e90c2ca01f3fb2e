"""
Entity Extraction Module.

Responsibilities:
- Relative/absolute due dates
- Status and priority keywords
- Percentages and currency amounts
"""

from .date_extractor import extract_date
from .entities import extract_status, extract_priority, extract_percentage, extract_amount
