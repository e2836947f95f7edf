from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CreateUserRequest(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    user_name: str = Field(min_length=1, max_length=64)
    email: EmailStr

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "user_name": "alovelace",
                "email": "ada@example.com",
            }
        }
    )


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    user_name: str
    email: EmailStr
    is_admin: bool

    model_config = ConfigDict(from_attributes=True)
