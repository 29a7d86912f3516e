"""Product model definition."""

from datetime import UTC, datetime
from decimal import Decimal

from utils.responses import isoformat_utc

from . import db


class Product(db.Model):
    """A catalogue entry with price and stock flag."""

    __tablename__ = "products"
    __table_args__ = (
        db.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    )

    id = db.Column(db.String(64), primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    in_stock = db.Column(db.Boolean, nullable=False, default=True)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=True,
    )

    def to_dict(self) -> dict:
        """Serialize the product to a dictionary."""

        price = float(self.price) if isinstance(self.price, Decimal) else self.price
        return {
            "id": self.id,
            "title": self.title,
            "price": price,
            "in_stock": self.in_stock,
            "created_at": isoformat_utc(self.created_at),
            "description": self.description,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Product {self.id}>"
