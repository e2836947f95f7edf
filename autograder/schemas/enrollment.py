from pydantic import BaseModel, ConfigDict


class EnrollmentResponse(BaseModel):
    user_id: int
    class_number: str
    is_instructor: bool

    model_config = ConfigDict(from_attributes=True)
