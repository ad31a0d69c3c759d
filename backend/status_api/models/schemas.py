from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    database: bool = True
    userAdmin: bool = False


class StatusErrorResponse(BaseModel):
    database: bool = False
    userAdmin: bool = False
    error: str = Field(default="db_unavailable")


class ErrorResponse(BaseModel):
    error: str
