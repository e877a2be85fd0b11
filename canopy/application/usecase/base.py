"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Requests carry identifiers as strings straight from the wire; a use case
    parses them into domain types, checks that an actor is present where one
    is needed, and shapes the domain result into its response model.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
