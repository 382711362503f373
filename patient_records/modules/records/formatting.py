"""Display helpers shared by the page templates."""
from datetime import date

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

def format_date(value: date | str | None) -> str:
    """``1815-12-10`` -> ``Dec 10, 1815``. Accepts dates, datetimes and ISO strings."""
    if not value:
        return ""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"

def full_name(record) -> str:
    middle = f" {record.middle_name}" if record.middle_name else ""
    return f"{record.first_name}{middle} {record.last_name}"

def format_address(record) -> str:
    return f"{record.street}, {record.city}, {record.state} {record.zip_code}"
