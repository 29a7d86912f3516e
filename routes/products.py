"""Products blueprint: public reads, admin-only writes."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, request

from models import db
from models.product import Product
from schemas import ProductCreate, ProductUpdate
from utils.auth import admin_required
from utils.errors import NotFoundError
from utils.ids import generate_id
from utils.request_validation import parse_json_request, validate_payload
from utils.responses import success_response

products_bp = Blueprint("products", __name__)


def _not_found() -> NotFoundError:
    return NotFoundError("Product not found", error_code="PRODUCT_NOT_FOUND")


@products_bp.route("", methods=["GET"])
def list_products():
    """Return every product, newest first."""

    products = Product.query.order_by(Product.created_at.desc()).all()
    return success_response(
        "Products retrieved successfully",
        products=[product.to_dict() for product in products],
        total=len(products),
    )


@products_bp.route("", methods=["POST"])
@admin_required
def create_product():
    data = validate_payload(ProductCreate, parse_json_request(request))

    product = Product(
        id=generate_id("prod"),
        title=data.title,
        price=data.price,
        in_stock=data.in_stock,
        description=data.description or None,
    )
    db.session.add(product)
    db.session.commit()

    current_app.logger.info("Created product %s", product.id)
    return success_response(
        "Product created successfully",
        HTTPStatus.CREATED,
        product=product.to_dict(),
    )


@products_bp.route("/<product_id>", methods=["GET"])
def get_product(product_id: str):
    product = db.session.get(Product, product_id)
    if product is None:
        raise _not_found()
    return success_response("Product retrieved successfully", product=product.to_dict())


@products_bp.route("/<product_id>", methods=["PUT"])
@admin_required
def update_product(product_id: str):
    """Apply a partial update in a single conditional statement."""

    data = validate_payload(ProductUpdate, parse_json_request(request))
    changes = data.changes()
    if "description" in changes:
        changes["description"] = changes["description"] or None

    updated = Product.query.filter_by(id=product_id).update(
        changes, synchronize_session=False
    )
    if not updated:
        db.session.rollback()
        raise _not_found()
    db.session.commit()

    product = db.session.get(Product, product_id)
    if product is None:  # deleted between the update and the read
        raise _not_found()

    current_app.logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)))
    return success_response("Product updated successfully", product=product.to_dict())


@products_bp.route("/<product_id>", methods=["DELETE"])
@admin_required
def delete_product(product_id: str):
    deleted = Product.query.filter_by(id=product_id).delete(synchronize_session=False)
    if not deleted:
        db.session.rollback()
        raise _not_found()
    db.session.commit()

    current_app.logger.info("Deleted product %s", product_id)
    return "", HTTPStatus.NO_CONTENT
