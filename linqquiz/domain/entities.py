from pydantic import BaseModel, ConfigDict, Field

# --- Families ---

class Person(BaseModel):
    age: int

    model_config = ConfigDict(frozen=True)

class Family(BaseModel):
    id: int
    persons: list[Person] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
