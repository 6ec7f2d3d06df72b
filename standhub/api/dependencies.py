# standhub/api/dependencies.py
from datetime import date

from fastapi import HTTPException, status


def check_window(start: date | None, end: date | None):
    """Odrzuca odwrocone okno dat, kazda granica jest opcjonalna."""
    if start and end and end < start:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end musi byc >= start")
