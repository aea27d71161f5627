from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire.

    Request bodies accept either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response"""

    error: str


class SuccessResponse(CamelModel):
    success: bool = True


class DeleteAllResponse(SuccessResponse):
    deleted_count: int


class InviteCounts(CamelModel):
    """Invite counts as sent by clients; missing values mean zero"""

    ladies_invited: Optional[int] = 0
    gents_invited: Optional[int] = 0
    children_invited: Optional[int] = 0
