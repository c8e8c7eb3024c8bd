from pydantic import BaseModel, Field
from typing import Optional


class UserResponse(BaseModel):
    id: int
    username: Optional[str] = Field(default=None)
    firstname: Optional[str] = Field(default=None)
    lastname: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "username": "jdoe",
                "firstname": "Jane",
                "lastname": "Doe",
                "email": "jane@example.com",
            }
        }


class ErrorResponse(BaseModel):
    error: str
