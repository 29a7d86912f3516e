"""User model definition."""

from datetime import UTC, datetime

from werkzeug.security import check_password_hash, generate_password_hash

from utils.responses import isoformat_utc

from . import db


ADMIN_ROLE = "admin"


class User(db.Model):
    """Represents a registered account."""

    __tablename__ = "users"
    __table_args__ = (
        db.CheckConstraint("age >= 13 AND age <= 120", name="ck_users_age_range"),
    )

    uid = db.Column(db.String(64), primary_key=True)
    # Stored lower-cased, so the unique index is case-insensitive in practice.
    email = db.Column(db.String(255), unique=True, index=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    bio = db.Column(db.Text, nullable=True)
    role = db.Column(
        db.String(32),
        nullable=False,
        default=ADMIN_ROLE,
        server_default=db.text("'admin'"),
    )
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=True,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict:
        """Serialize the public profile. The password hash is never included."""

        return {
            "uid": self.uid,
            "email": self.email,
            "name": self.name,
            "age": self.age,
            "created_at": isoformat_utc(self.created_at),
            "bio": self.bio,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
