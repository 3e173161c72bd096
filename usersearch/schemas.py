from typing import List

from pydantic import BaseModel, Field

MAX_LIMIT = 25
ERROR_BAD_ORDER_FIELD = "ErrorBadOrderField"
ACCESS_TOKEN_HEADER = "AccessToken"


class SearchRequest(BaseModel):
    limit: int = 0
    offset: int = 0
    query: str = ""
    order_field: str = ""
    # -1 descending, 0 as stored, 1 ascending
    order_by: int = 0


class User(BaseModel):
    id: int = Field(alias="Id")
    name: str = Field(alias="Name")
    age: int = Field(alias="Age")
    about: str = Field(default="", alias="About")
    gender: str = Field(default="", alias="Gender")

    class Config:
        populate_by_name = True
        frozen = True


class SearchResponse(BaseModel):
    users: List[User]
    next_page: bool = False


class SearchErrorResponse(BaseModel):
    error: str = Field(alias="Error")

    class Config:
        populate_by_name = True


class RootResponse(BaseModel):
    msg: str


class HealthResponse(BaseModel):
    status: str
