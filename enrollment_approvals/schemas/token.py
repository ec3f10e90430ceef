from pydantic import BaseModel, Field

class LoginIn(BaseModel):
    email: str
    password: str = Field(min_length=1)

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
