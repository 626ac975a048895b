# storefront/schemas/common.py
import uuid

from sqlmodel import SQLModel


class InsertResult(SQLModel):
    """
    Result of an insert.

    `message` is only set when nothing was inserted (e.g. duplicate user);
    routes use `response_model_exclude_unset=True` so it is omitted otherwise.
    """

    insertedId: uuid.UUID | None = None
    message: str | None = None


class UpdateResult(SQLModel):
    """Matched vs. actually changed records."""

    matchedCount: int
    modifiedCount: int


class DeleteResult(SQLModel):
    deletedCount: int
