from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassCreate(BaseModel):
    class_number: str = Field(min_length=1)
    class_description: Optional[str] = None


class ClassResponse(BaseModel):
    class_number: str
    class_description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
