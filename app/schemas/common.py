from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


RequiredStr = Annotated[str, Field(min_length=1)]


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ActionResult(APIModel):
    success: bool
    message: str


class InsertResult(ActionResult):
    inserted_id: str
