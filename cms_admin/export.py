"""Newsletter subscriber export."""

import csv
import io
import logging

import pandas as pd

from cms_admin.config import settings
from cms_admin.providers.base import Filter, Pagination, Sorter, SortOrder

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["#", "Email", "Subscribed Date"]
EXPORT_SHEET = "Subscribers"
EXPORT_DATE_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def email_filters(search: str | None) -> list[Filter]:
    return [Filter("email", "contains", search)] if search else []


async def fetch_all_subscribers(provider, search: str | None = None, page_size: int | None = None) -> list[dict]:
    """Every subscriber matching ``search`` in a single large page."""
    result = await provider.get_list(
        "newsletter",
        pagination=Pagination(current=1, page_size=page_size or settings.export_page_size),
        filters=email_filters(search),
        sorters=[Sorter("createdAt", SortOrder.DESC)],
    )
    records = result.get("data") or []
    logger.info(f"Fetched {len(records)} subscribers for export")
    return records


def format_export_date(value) -> str:
    if not value:
        return ""
    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(ts):
        return str(value)
    return ts.strftime(EXPORT_DATE_FORMAT)


def subscribers_frame(records: list[dict]) -> pd.DataFrame:
    rows = [
        (index, record.get("email", ""), format_export_date(record.get("createdAt")))
        for index, record in enumerate(records, start=1)
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def subscribers_to_csv(records: list[dict]) -> str:
    """CSV text with a header row and every cell quoted."""
    return subscribers_frame(records).to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")


def subscribers_to_xlsx(records: list[dict]) -> bytes:
    """Excel workbook with the same columns on a "Subscribers" sheet."""
    buffer = io.BytesIO()
    subscribers_frame(records).to_excel(buffer, index=False, sheet_name=EXPORT_SHEET, engine="openpyxl")
    return buffer.getvalue()
