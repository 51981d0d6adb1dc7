"""User aggregate — a person who can sign in and shop."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.shared.email import is_valid_email, normalize_email
from storefront.user.events import UserRegistered


class UserRole(Enum):
    """Enumeration of user roles carried in issued tokens."""

    CUSTOMER = "customer"
    ADMIN = "admin"


@storefront.aggregate
class User:
    """A registered storefront user, identified by a unique email address.

    Only a bcrypt hash of the password is ever stored. The hash is never
    rendered by the API; responses expose a summary built from the other
    fields.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    registered_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Name must not be blank"]})

    @classmethod
    def register(cls, name, email, password_hash, role=UserRole.CUSTOMER.value):
        now = datetime.now(UTC)
        user = cls(
            name=name.strip() if name else name,
            email=normalize_email(email),
            password_hash=password_hash,
            role=role,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                name=user.name,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN.value
