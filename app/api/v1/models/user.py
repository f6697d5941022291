from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Directory record. Loaded once at startup and never modified."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 0,
                "name": "Jorn",
            }
        },
    )

    id: int = Field(..., description="Unique user identifier")
    name: str = Field(..., description="Display name")
