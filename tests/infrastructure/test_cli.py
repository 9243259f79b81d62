"""End-to-end tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("STOREFRONT_PUBLIC_DIR", raising=False)
    monkeypatch.delenv("STOREFRONT_LOG_LEVEL", raising=False)
    bootstrap.settings.cache_clear()
    bootstrap.cache.cache_clear()
    yield tmp_path / "data"
    bootstrap.settings.cache_clear()
    bootstrap.cache.cache_clear()


@pytest.fixture
def uploads(tmp_path):
    file_path = tmp_path / "f.bin"
    file_path.write_bytes(b"0123456789")
    image_path = tmp_path / "i.png"
    image_path.write_bytes(b"\x89PNG" + b"\x00" * 196)
    return file_path, image_path


def _invoke(*args):
    return CliRunner().invoke(cli, list(args))


def _add(uploads, category="TOOLS"):
    file_path, image_path = uploads
    return _invoke(
        "product", "add",
        "--name", "Widget",
        "--description", "A widget",
        "--price-in-cents", "500",
        "--category", category,
        "--file", str(file_path),
        "--image", str(image_path),
    )


def _only_product():
    products = bootstrap.product_repository().list_all()
    assert len(products) == 1
    return products[0]


class TestSession:

    def test_login_whoami_logout(self, data_dir):
        assert "Signed in as admin-1" in _invoke("session", "login", "--user", "admin-1").output
        assert _invoke("session", "whoami").output.strip() == "admin-1"
        assert "Signed out." in _invoke("session", "logout").output
        assert "Not signed in." in _invoke("session", "whoami").output


class TestProductAdd:

    def test_add_requires_sign_in(self, data_dir, uploads):
        result = _add(uploads)
        assert result.exit_code == 1
        assert "/sign-in" in result.output
        assert bootstrap.product_repository().list_all() == []

    def test_add_stores_product_and_assets(self, data_dir, uploads):
        _invoke("session", "login", "--user", "admin-1")
        result = _add(uploads)

        assert result.exit_code == 0, result.output
        assert "-> /admin/products" in result.output
        product = _only_product()
        assert product.category == "tools"
        assert product.is_available_for_purchase is False
        assert product.user_id == "admin-1"
        assert (data_dir / product.file_path).read_bytes() == b"0123456789"
        assert (data_dir / "public" / product.image_path.lstrip("/")).exists()

    def test_add_with_empty_file_reports_field(self, data_dir, uploads, tmp_path):
        _invoke("session", "login", "--user", "admin-1")
        empty = tmp_path / "empty.bin"
        empty.write_bytes(b"")
        result = _add((empty, uploads[1]))

        assert result.exit_code == 1
        assert "file: required" in result.output
        assert not (data_dir / "products").exists()


class TestProductLifecycle:

    def test_availability_catalog_and_delete(self, data_dir, uploads):
        _invoke("session", "login", "--user", "admin-1")
        _add(uploads)
        product = _only_product()

        assert "No products available." in _invoke("catalog").output

        result = _invoke("product", "availability", "--id", product.id, "--available")
        assert result.exit_code == 0
        assert "Widget" in _invoke("catalog").output

        assert _invoke("product", "approve", "--id", product.id).exit_code == 0
        assert "yes" in _invoke("product", "list").output

        assert _invoke("product", "delete", "--id", product.id).exit_code == 0
        assert bootstrap.product_repository().list_all() == []
        assert not (data_dir / product.file_path).exists()
        assert not (data_dir / "public" / product.image_path.lstrip("/")).exists()

    def test_update_replaces_file(self, data_dir, uploads, tmp_path):
        _invoke("session", "login", "--user", "admin-1")
        _add(uploads)
        before = _only_product()
        new_file = tmp_path / "g.bin"
        new_file.write_bytes(b"new")

        result = _invoke(
            "product", "update", "--id", before.id,
            "--price-in-cents", "900", "--file", str(new_file),
        )

        assert result.exit_code == 0, result.output
        after = _only_product()
        assert after.price_in_cents == 900
        assert after.name == "Widget"
        assert after.file_path != before.file_path
        assert after.image_path == before.image_path
        assert not (data_dir / before.file_path).exists()
        assert (data_dir / after.file_path).read_bytes() == b"new"

    def test_unknown_product(self, data_dir):
        for args in (
            ("product", "delete", "--id", "nope"),
            ("product", "approve", "--id", "nope"),
            ("product", "availability", "--id", "nope"),
            ("product", "update", "--id", "nope", "--name", "X"),
        ):
            result = _invoke(*args)
            assert result.exit_code == 1
            assert "not found" in result.output

    def test_home_sections(self, data_dir):
        output = _invoke("home").output
        assert "Newest" in output
        assert "All Products" in output
