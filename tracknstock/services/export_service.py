"""
CSV export of the inventory report
"""
import io
import csv
import logging
from pathlib import Path
from typing import Iterable, Union

from tracknstock.domain.product import Product

logger = logging.getLogger(__name__)


REPORT_FILENAME = "inventory_report.csv"

CSV_HEADERS = ['Brand', 'Name', 'Category', 'Quantity', 'Min Stock', 'Price (₹)', 'Status']


def products_to_csv(products: Iterable[Product]) -> str:
    """
    Serialize products to CSV text

    Values with commas, quotes or line breaks are quoted, so a brand like
    "Smith, Jones & Co" stays in one column.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for p in products:
        writer.writerow([
            p.supplier,
            p.name,
            p.category,
            p.quantity,
            p.min_stock,
            f"{p.price:.2f}",
            p.status.label,
        ])
    return output.getvalue()


def export_inventory(products: Iterable[Product], output_dir: Union[str, Path] = ".") -> Path:
    """
    Write the full inventory report to <output_dir>/inventory_report.csv

    Callers pass the whole product collection, not the filtered view.

    Returns:
        Path of the written file
    """
    products = list(products)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / REPORT_FILENAME
    path.write_text(products_to_csv(products), encoding='utf-8', newline='')

    logger.info(f"Exported {len(products)} products to {path}")
    return path
