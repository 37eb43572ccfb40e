from pydantic import BaseModel
from typing import Generic, List, Optional, TypeVar, Union
from uuid import UUID

from shared.core.config import settings
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class CommonQueryParams(EmptyStringModel):
    q: Optional[str] = None
    page: int = 0
    size: int = settings.DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return max(self.page, 0) * self.limit

    @property
    def limit(self) -> int:
        return min(max(self.size, 1), settings.MAX_PAGE_SIZE)


class Lookup(BaseModel):
    id: Union[str, UUID]  # accepts both UUID and str
    name: str

    class Config:
        from_attributes = True


class ViolationOut(BaseModel):
    field: str
    rule: str
    message: str


class JsonOutResult(BaseModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str
    errors: Optional[List[ViolationOut]] = None
