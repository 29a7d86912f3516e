"""Tests for the model helpers."""

from datetime import datetime
from decimal import Decimal

from models import db
from models.product import Product
from models.user import User


def test_user_password_helpers_and_serialization(app):
    with app.app_context():
        user = User(uid="user_1", email="helper@example.com", name="Helper", age=40)
        user.set_password("password123")
        db.session.add(user)
        db.session.commit()

        assert user.role == "admin"
        assert user.is_admin is True
        assert user.password_hash != "password123"
        assert user.check_password("password123")
        assert not user.check_password("password124")

        data = user.to_dict()
        assert "password_hash" not in data
        assert "role" not in data
        assert data["created_at"].endswith("Z")
        datetime.fromisoformat(data["created_at"].replace("Z", "+00:00"))


def test_product_price_serializes_as_number(app):
    with app.app_context():
        product = Product(id="prod_1", title="Mug", price=Decimal("4.50"), in_stock=True)
        db.session.add(product)
        db.session.commit()

        data = product.to_dict()
        assert data["price"] == 4.5
        assert isinstance(data["price"], float)
        assert data["description"] is None
