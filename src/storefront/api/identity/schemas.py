"""Request/response schemas for the authentication API."""

from storefront.api.schemas import CamelModel


class RegisterRequest(CamelModel):
    name: str
    email: str
    password: str


class RegisterResponse(CamelModel):
    success: bool = True
    message: str = "User registered successfully"
    user_id: str


class LoginRequest(CamelModel):
    email: str
    password: str


class UserSchema(CamelModel):
    id: str
    name: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user) -> "UserSchema":
        return cls(id=str(user.id), name=user.name, email=user.email, role=user.role)


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    user: UserSchema
