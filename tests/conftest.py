"""Pytest fixtures for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.data.context import StoreContext
from storefront.domain.models import CartLineItem
from storefront.services.customer_service import CustomerFacade
from storefront.services.employee_service import EmployeeFacade


@pytest.fixture
def context():
    """Fresh seeded stores for every test."""
    return StoreContext.seeded()


@pytest.fixture
def customer(context):
    return CustomerFacade(context)


@pytest.fixture
def employee(context):
    return EmployeeFacade(context)


@pytest.fixture
def client(context):
    return TestClient(create_app(context))


@pytest.fixture
def arduino_line(context):
    """Two Arduino boards (product 2, 39.95 each) as a cart line."""
    product = context.products.get_by_id(2)
    return CartLineItem(
        product_id=product.id,
        name=product.name,
        price=product.price,
        quantity=2,
        image=product.image,
    )
