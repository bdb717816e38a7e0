from sqlmodel import Field, SQLModel


# JSON payload containing access token
class Token(SQLModel):
    access_token: str
    token_type: str = Field(
        default="bearer", description="Type of the token, usually 'bearer'"
    )


# Contents of JWT token
class TokenPayload(SQLModel):
    sub: str | None = Field(
        default=None, description="Subject of the token, the account ID"
    )
