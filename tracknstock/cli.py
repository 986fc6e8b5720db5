#!/usr/bin/env python3
"""
TrackNStock - command line client

Lists, filters, edits and exports the inventory served by the products
REST API.

Usage:
    tracknstock list --status low --category Electronics
    tracknstock list --server --search galaxy
    tracknstock stats
    tracknstock add --name "Galaxy S24" --category Electronics --brand Samsung \\
        --quantity 12 --min-stock 5 --price 74999
    tracknstock edit 7 --quantity 3
    tracknstock delete 7
    tracknstock export --output-dir reports/

Author: TM3
Date: 2025-10-22
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from tracknstock.connectors.inventory_api_connector import InventoryApiConnector
from tracknstock.core.config import settings
from tracknstock.core.exceptions import InventoryClientError, ValidationError
from tracknstock.domain.catalog import CATALOG
from tracknstock.domain.product import Product
from tracknstock.domain.statistics import Statistics
from tracknstock.services.export_service import export_inventory
from tracknstock.services.filter_service import STATUS_FILTERS
from tracknstock.services.form_service import FormController
from tracknstock.services.formatting import format_price
from tracknstock.services.product_store import ProductStore
from tracknstock.state import SearchChanged, StatusFilterChanged, CategorySelected, BrandSelected

logger = logging.getLogger(__name__)

TABLE_HEADERS = ['ID', 'Product', 'Brand', 'Category', 'Quantity', 'Min Stock', 'Price', 'Status']

# CLI option -> form field
FORM_OPTIONS = {
    'name': 'name',
    'category': 'category',
    'brand': 'supplier',
    'quantity': 'quantity',
    'min_stock': 'min_stock',
    'price': 'price',
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


# ==================== RENDERING ====================

def render_table(products: List[Product]) -> str:
    """Plain-text product table"""
    if not products:
        return "📦 No products found"

    rows = [
        [
            str(p.id),
            p.name,
            p.supplier,
            p.category,
            str(p.quantity),
            str(p.min_stock),
            format_price(p.price),
            p.status.label,
        ]
        for p in products
    ]
    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(TABLE_HEADERS)
    ]

    def line(cells):
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    output = [line(TABLE_HEADERS), line(["-" * w for w in widths])]
    output.extend(line(row) for row in rows)
    return "\n".join(output)


def render_statistics(statistics: Statistics) -> str:
    return "\n".join([
        f"📦 Total Products:  {statistics.total_products}",
        f"⚠️  Low Stock Alert: {statistics.low_stock_count}",
        f"📉 Out of Stock:    {statistics.out_of_stock_count}",
        f"📈 Total Value:     {format_price(statistics.total_value)}",
    ])


def notify(message: str) -> None:
    print(message)


def ask_confirmation(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ('y', 'yes')


# ==================== COMMANDS ====================

async def cmd_list(args, store: ProductStore) -> None:
    if args.server:
        await store.load_matching(args.search, args.status)
    else:
        await store.refresh()

    store.dispatch(SearchChanged(args.search))
    store.dispatch(StatusFilterChanged(args.status))
    store.dispatch(CategorySelected(args.category))
    store.dispatch(BrandSelected(args.brand))

    visible = store.visible_products
    print(render_table(visible))
    if store.state.criteria.is_default:
        print(f"\n{len(visible)} products")
    else:
        print(f"\n{len(visible)} of {len(store.products)} products shown")


async def cmd_stats(args, store: ProductStore) -> None:
    await store.load_statistics()
    print(render_statistics(store.statistics))


async def cmd_add(args, store: ProductStore) -> None:
    form = FormController(store)
    if args.category_filter:
        store.dispatch(CategorySelected(args.category_filter))
    form.open_add()
    _apply_form_options(form, args)

    await form.submit()
    notify(store.state.notice)


async def cmd_edit(args, store: ProductStore) -> None:
    form = FormController(store)
    product = await store.connector.get_product(args.id)
    form.open_edit(product)
    _apply_form_options(form, args)

    await form.submit()
    notify(store.state.notice)


async def cmd_delete(args, store: ProductStore) -> None:
    form = FormController(store)

    def confirm() -> bool:
        return args.yes or ask_confirmation(f"Are you sure you want to delete product {args.id}?")

    if await form.delete(args.id, confirm):
        notify(store.state.notice)
    else:
        notify("Delete cancelled")


async def cmd_export(args, store: ProductStore) -> None:
    # Export covers the whole inventory, whatever is filtered on screen
    await store.load_products()
    path = export_inventory(store.products, args.output_dir or settings.EXPORT_DIR)
    notify(f"📥 Exported {len(store.products)} products to {path}")


async def cmd_categories(args, store: ProductStore) -> None:
    if args.in_use:
        # What the backend actually has, rather than the catalog
        categories = await store.connector.list_categories()
        suppliers = await store.connector.list_suppliers()
        print(f"Categories: {', '.join(categories) or '-'}")
        print(f"Brands: {', '.join(suppliers) or '-'}")
        return

    for entry in CATALOG:
        print(f"{entry.category.value}: {', '.join(entry.brands)}")


def _apply_form_options(form: FormController, args) -> None:
    for option, field_name in FORM_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            form.update_field(field_name, value)


# ==================== PARSER ====================

def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--name', help='Product name')
    parser.add_argument('--category', help='Category (see "categories")')
    parser.add_argument('--brand', help='Brand sold under the category')
    parser.add_argument('--quantity', help='Units in stock')
    parser.add_argument('--min-stock', dest='min_stock', help='Reorder threshold')
    parser.add_argument('--price', help='Unit price in rupees')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tracknstock',
        description='TrackNStock - tracks and stocks everything easily'
    )
    parser.add_argument(
        '--api-url',
        default=None,
        help=f'Products API base URL (default: {settings.API_BASE_URL})'
    )
    parser.add_argument(
        '--log-level',
        default=settings.LOG_LEVEL,
        help=f'Logging level (default: {settings.LOG_LEVEL})'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='Show products')
    list_parser.add_argument('--search', default='', help='Match name, brand or category')
    list_parser.add_argument('--status', default='all', choices=STATUS_FILTERS, help='Stock status filter')
    list_parser.add_argument('--category', default='all', help='Category filter')
    list_parser.add_argument('--brand', default='all', help='Brand filter')
    list_parser.add_argument('--server', action='store_true',
                             help='Use the server-side search, low-stock and out-of-stock endpoints')
    list_parser.set_defaults(handler=cmd_list, error_message='Error loading products. Make sure the backend is running')

    stats_parser = subparsers.add_parser('stats', help='Show inventory statistics')
    stats_parser.set_defaults(handler=cmd_stats, error_message='Error fetching statistics')

    add_parser = subparsers.add_parser('add', help='Add a product')
    _add_form_arguments(add_parser)
    add_parser.add_argument('--category-filter', default=None,
                            help='Active category filter; pre-fills the category')
    add_parser.set_defaults(handler=cmd_add, error_message='Error adding product')

    edit_parser = subparsers.add_parser('edit', help='Edit a product')
    edit_parser.add_argument('id', type=int, help='Product ID')
    _add_form_arguments(edit_parser)
    edit_parser.set_defaults(handler=cmd_edit, error_message='Error updating product')

    delete_parser = subparsers.add_parser('delete', help='Delete a product')
    delete_parser.add_argument('id', type=int, help='Product ID')
    delete_parser.add_argument('--yes', '-y', action='store_true', help='Do not ask for confirmation')
    delete_parser.set_defaults(handler=cmd_delete, error_message='Error deleting product')

    export_parser = subparsers.add_parser('export', help='Export the inventory report as CSV')
    export_parser.add_argument('--output-dir', default=None,
                               help=f'Directory for inventory_report.csv (default: {settings.EXPORT_DIR})')
    export_parser.set_defaults(handler=cmd_export, error_message='Error exporting inventory')

    categories_parser = subparsers.add_parser('categories', help='Show categories and their brands')
    categories_parser.add_argument('--in-use', action='store_true',
                                   help='List the categories and brands stored on the server instead')
    categories_parser.set_defaults(handler=cmd_categories, error_message='Error listing categories')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    store = ProductStore(InventoryApiConnector(base_url=args.api_url))

    try:
        asyncio.run(args.handler(args, store))
    except ValidationError as e:
        print(f"⚠️ {e}", file=sys.stderr)
        return 1
    except InventoryClientError as e:
        logger.error(f"{args.error_message}: {e}")
        print(f"❌ {args.error_message}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
