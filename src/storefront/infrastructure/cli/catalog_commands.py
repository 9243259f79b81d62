"""CLI commands for the customer-facing product listings."""

from __future__ import annotations

import click

from storefront.application.browse_products import BrowseProductsHandler
from storefront.domain.model.product import Product
from storefront.infrastructure.bootstrap import cache, product_repository


def _display_grid(products: list[Product]) -> None:
    if not products:
        click.echo("  No products available.")
        return
    for p in products:
        click.echo(f"  {p.name:<24} {p.category:<12} {p.price_display:>10}")
        click.echo(f"    {p.description}")
        click.echo(f"    image: {p.image_path}")


@click.command("catalog")
def catalog() -> None:
    """List products available for purchase."""
    handler = BrowseProductsHandler(product_repo=product_repository(), cache=cache())
    _display_grid(handler.catalog())


@click.command("home")
def home() -> None:
    """Show the storefront home page grids."""
    handler = BrowseProductsHandler(product_repo=product_repository(), cache=cache())
    for section in handler.home():
        click.echo(section.title)
        click.echo("=" * len(section.title))
        _display_grid(section.products)
        click.echo()
