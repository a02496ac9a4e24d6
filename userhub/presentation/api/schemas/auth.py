from pydantic import BaseModel

from .fields import Email, LoginPassword, Name, Password


class RegisterPayload(BaseModel):
    name: Name
    email: Email
    password: Password


class LoginPayload(BaseModel):
    email: Email
    password: LoginPassword
