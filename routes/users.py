"""Read-only user directory for authenticated callers."""

from __future__ import annotations

from flask import Blueprint

from models import db
from models.user import User
from utils.auth import auth_required
from utils.errors import NotFoundError
from utils.responses import success_response

users_bp = Blueprint("users", __name__)


@users_bp.route("", methods=["GET"])
@auth_required
def list_users():
    users = User.query.order_by(User.created_at.desc()).all()
    return success_response(
        "Users retrieved successfully",
        users=[user.to_dict() for user in users],
        total=len(users),
    )


@users_bp.route("/<user_id>", methods=["GET"])
@auth_required
def get_user(user_id: str):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found", error_code="USER_NOT_FOUND")
    return success_response("User retrieved successfully", user=user.to_dict())
