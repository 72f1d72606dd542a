from pydantic import BaseModel, ConfigDict, Field


class LoginRequestSchema(BaseModel):
    email: str = ""


class SessionSchema(BaseModel):
    email: str


class BookRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slot_id: str = Field(default="", alias="slotId")


class CreateServiceRequestSchema(BaseModel):
    name: str = ""
    description: str | None = None
    duration: int | float | None = None


class CreateSlotRequestSchema(BaseModel):
    datetime: str = ""
    capacity: int | float | None = None


class ActionResponseSchema(BaseModel):
    ok: bool
    message: str
