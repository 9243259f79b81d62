"""Unit tests for the product form schemas."""

from storefront.application.schemas import (
    NOT_A_FILE,
    NOT_AN_IMAGE,
    REQUIRED,
    ProductForm,
    ProductUpdateForm,
    parse_form,
)
from tests.fakes import make_image, make_upload, widget_form


class TestProductForm:

    def test_valid_form_is_typed_and_normalised(self):
        result = parse_form(ProductForm, widget_form())
        assert result.ok
        assert result.errors == {}
        assert result.data.price_in_cents == 500
        assert result.data.category == "tools"

    def test_empty_file_is_required(self):
        result = parse_form(ProductForm, widget_form(file=make_upload(size=0)))
        assert not result.ok
        assert result.errors == {"file": [REQUIRED]}

    def test_empty_image_is_required(self):
        result = parse_form(ProductForm, widget_form(image=make_image(size=0)))
        assert result.errors == {"image": [REQUIRED]}

    def test_non_image_rejected(self):
        form = widget_form(image=make_upload("notes.txt", 20, "text/plain"))
        result = parse_form(ProductForm, form)
        assert result.errors == {"image": [NOT_AN_IMAGE]}

    def test_missing_fields_are_required(self):
        result = parse_form(ProductForm, {})
        assert set(result.errors) == {
            "name", "description", "priceInCents", "category", "file", "image",
        }
        assert result.errors["file"] == [REQUIRED]
        assert result.errors["name"] == [REQUIRED]

    def test_text_in_file_field_is_required(self):
        result = parse_form(ProductForm, widget_form(file="f.bin"))
        assert result.errors == {"file": [REQUIRED]}

    def test_blank_text_fields_rejected(self):
        result = parse_form(ProductForm, widget_form(name="", category=""))
        assert set(result.errors) == {"name", "category"}

    def test_price_must_be_at_least_one(self):
        assert "priceInCents" in parse_form(ProductForm, widget_form(priceInCents="0")).errors
        assert "priceInCents" in parse_form(ProductForm, widget_form(priceInCents="-5")).errors

    def test_price_must_be_an_integer(self):
        assert "priceInCents" in parse_form(ProductForm, widget_form(priceInCents="abc")).errors
        assert "priceInCents" in parse_form(ProductForm, widget_form(priceInCents="5.5")).errors

    def test_several_errors_reported_together(self):
        form = widget_form(name="", file=make_upload(size=0))
        assert set(parse_form(ProductForm, form).errors) == {"name", "file"}


class TestProductUpdateForm:

    def _form(self, **overrides):
        form = widget_form()
        del form["file"], form["image"]
        form.update(overrides)
        return form

    def test_assets_are_optional(self):
        result = parse_form(ProductUpdateForm, self._form())
        assert result.ok
        assert result.data.new_file is None
        assert result.data.new_image is None

    def test_empty_assets_mean_keep_existing(self):
        form = self._form(file=make_upload(size=0), image=make_image(size=0))
        result = parse_form(ProductUpdateForm, form)
        assert result.ok
        assert result.data.new_file is None
        assert result.data.new_image is None

    def test_blank_string_means_no_asset(self):
        result = parse_form(ProductUpdateForm, self._form(file=""))
        assert result.ok
        assert result.data.new_file is None

    def test_submitted_assets_are_exposed(self):
        form = self._form(file=make_upload("new.bin"), image=make_image("new.png"))
        result = parse_form(ProductUpdateForm, form)
        assert result.data.new_file.filename == "new.bin"
        assert result.data.new_image.filename == "new.png"

    def test_non_image_still_rejected(self):
        form = self._form(image=make_upload("notes.txt", 5, "text/plain"))
        assert parse_form(ProductUpdateForm, form).errors == {"image": [NOT_AN_IMAGE]}

    def test_text_in_file_field_rejected(self):
        assert parse_form(ProductUpdateForm, self._form(file="x")).errors == {
            "file": [NOT_A_FILE]
        }

    def test_category_lowercased(self):
        result = parse_form(ProductUpdateForm, self._form(category="MiXeD"))
        assert result.data.category == "mixed"
