"""CLI commands for the admin side of the Product aggregate."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.approve_product import ApproveProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import (
    MutationResult,
    NotFound,
    Success,
    Unauthenticated,
    ValidationFailed,
)
from storefront.application.toggle_availability import ToggleAvailabilityHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Upload
from storefront.infrastructure.bootstrap import (
    asset_store,
    cache,
    product_repository,
    session_store,
)

_UPLOAD = click.Path(exists=True, dir_okay=False, path_type=Path)


def _read_upload(path: Path | None) -> Upload | None:
    """Wrap a local file the way a browser would submit it."""
    if path is None:
        return None
    content_type, _ = mimetypes.guess_type(path.name)
    return Upload(
        filename=path.name,
        content_type=content_type or "application/octet-stream",
        data=path.read_bytes(),
    )


def _load_product(product_id: str) -> Product:
    product = product_repository().get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product '{product_id}' not found")
    return product


def _check(result: MutationResult) -> Success:
    """Turn every non-success outcome into a CLI error."""
    if isinstance(result, ValidationFailed):
        lines = [
            f"  {field}: {message}"
            for field, messages in result.errors.items()
            for message in messages
        ]
        raise click.ClickException("Invalid product:\n" + "\n".join(lines))
    if isinstance(result, NotFound):
        raise click.ClickException(f"Product '{result.product_id}' not found")
    if isinstance(result, Unauthenticated):
        raise click.ClickException(
            f"Not signed in. Sign in first (redirect: {result.redirect_to})"
        )
    return result


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price-in-cents", required=True, help="Price in cents (e.g. 500).")
@click.option("--category", required=True, help="Category (stored lowercase).")
@click.option("--file", "file_path", required=True, type=_UPLOAD, help="Purchasable file.")
@click.option("--image", "image_path", required=True, type=_UPLOAD, help="Preview image.")
def product_add(
    name: str,
    description: str,
    price_in_cents: str,
    category: str,
    file_path: Path,
    image_path: Path,
) -> None:
    """Upload a new product. It starts unavailable and unapproved."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        asset_store=asset_store(),
        session=session_store(),
        cache=cache(),
    )

    try:
        result = handler.handle({
            "name": name,
            "description": description,
            "priceInCents": price_in_cents,
            "category": category,
            "file": _read_upload(file_path),
            "image": _read_upload(image_path),
        })
    except (DomainException, OSError) as exc:
        raise click.ClickException(str(exc))

    success = _check(result)
    click.echo(f"Product {success.product_id} '{name}' added")
    click.echo(f"-> {success.redirect_to}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", help="New name.")
@click.option("--description", help="New description.")
@click.option("--price-in-cents", help="New price in cents.")
@click.option("--category", help="New category.")
@click.option("--file", "file_path", type=_UPLOAD, help="Replacement file.")
@click.option("--image", "image_path", type=_UPLOAD, help="Replacement image.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price_in_cents: str | None,
    category: str | None,
    file_path: Path | None,
    image_path: Path | None,
) -> None:
    """Edit a product. Omitted fields keep their current values."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        asset_store=asset_store(),
        session=session_store(),
        cache=cache(),
    )

    try:
        current = _load_product(product_id)
        form = {
            "name": current.name if name is None else name,
            "description": current.description if description is None else description,
            "priceInCents": (
                current.price_in_cents if price_in_cents is None else price_in_cents
            ),
            "category": current.category if category is None else category,
        }
        if file_path is not None:
            form["file"] = _read_upload(file_path)
        if image_path is not None:
            form["image"] = _read_upload(image_path)
        result = handler.handle(product_id, form)
    except (DomainException, OSError) as exc:
        raise click.ClickException(str(exc))

    success = _check(result)
    click.echo(f"Product {success.product_id} updated")
    click.echo(f"-> {success.redirect_to}")


@click.command("list")
def product_list() -> None:
    """List every product, including unavailable ones."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<34} {'Name':<20} {'Category':<12} {'Price':>10} {'Available':>10} {'Approved':>9}"
    )
    click.echo("-" * 100)
    for p in products:
        click.echo(
            f"{p.id:<34} {p.name:<20} {p.category:<12} {p.price_display:>10} "
            f"{'yes' if p.is_available_for_purchase else 'no':>10} "
            f"{'yes' if p.is_approved_by_admin else 'no':>9}"
        )


@click.command("availability")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--available/--unavailable",
    "is_available",
    default=True,
    show_default=True,
    help="Whether customers can buy the product.",
)
def product_availability(product_id: str, is_available: bool) -> None:
    """Make a product available or unavailable for purchase."""
    handler = ToggleAvailabilityHandler(product_repo=product_repository(), cache=cache())

    try:
        result = handler.handle(product_id, is_available)
    except (DomainException, OSError) as exc:
        raise click.ClickException(str(exc))

    _check(result)
    state = "available" if is_available else "unavailable"
    click.echo(f"Product {product_id} is now {state}")


@click.command("approve")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_approve(product_id: str) -> None:
    """Approve a product."""
    handler = ApproveProductHandler(product_repo=product_repository(), cache=cache())

    try:
        result = handler.handle(product_id)
    except (DomainException, OSError) as exc:
        raise click.ClickException(str(exc))

    _check(result)
    click.echo(f"Product {product_id} approved")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product together with its file and image."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        asset_store=asset_store(),
        cache=cache(),
    )

    try:
        result = handler.handle(product_id)
    except (DomainException, OSError) as exc:
        raise click.ClickException(str(exc))

    _check(result)
    click.echo(f"Product {product_id} deleted")
