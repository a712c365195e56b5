from pydantic import BaseModel, ConfigDict, Field


class EmployeeSchema(BaseModel):
    id: int
    name: str
    role: str
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload for POST and PUT, a client supplied id is dropped
class EmployeePayload(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    role: str = Field(min_length=1, max_length=255)
    model_config = ConfigDict(extra="ignore")
