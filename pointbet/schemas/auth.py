from typing import Optional

from pydantic import BaseModel


# Fields are optional so missing values reach the validators and get
# their own messages instead of a generic schema error.
class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    identifier: Optional[str] = None
    password: Optional[str] = None

    @property
    def login_identifier(self):
        return self.identifier if self.identifier is not None else self.email


class ProfileUpdateRequest(BaseModel):
    username: Optional[str] = None
    profile_image_url: Optional[str] = None
