from pydantic import BaseModel, ConfigDict, Field


class SignIn(BaseModel):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str


class SessionOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
