"""Unit tests for Product DTOs."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import ProductInputDTO, ProductOptionDTO
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductInputDTO:
    def test_valid(self):
        dto = ProductInputDTO(name=" Banner 90x120 cm ", price="75.00")
        assert dto.name == "Banner 90x120 cm"
        assert dto.price == Decimal("75.00")

    @pytest.mark.parametrize("price", ["0", "-1.50", "0.00"])
    def test_price_must_be_positive(self, price):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO(name="Banner", price=price)
        assert exc_info.value.errors()[0]["loc"] == ("price",)

    @pytest.mark.parametrize("price", ["123456789012", "1e30", "99999999.995"])
    def test_price_must_fit_the_column(self, price):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO(name="Banner", price=price)
        assert "Price must not exceed 99999999.99." in exc_info.value.errors()[0]["msg"]

    def test_price_must_be_numeric(self):
        with pytest.raises(ValidationError):
            ProductInputDTO(name="Banner", price="caro")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductInputDTO(name="  ", price="10")
        assert "Name must not be empty." in str(exc_info.value)


def test_option_from_entity():
    product = Product(name="Caneca Personalizada", price=Decimal("32.00"))
    option = ProductOptionDTO.from_entity(product).model_dump(mode="json")
    assert option == {"id": str(product.id), "name": "Caneca Personalizada", "price": "32.00"}
