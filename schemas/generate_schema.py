from pydantic import BaseModel, Field


class GenerationResult(BaseModel):
    """Outcome of one regeneration run.

    Serialised with ``model_dump(by_alias=True, exclude_none=True)`` this is
    ``{success, projectsGenerated, aiSectorsGenerated}`` on success and
    ``{success, error}`` on failure.
    """

    success: bool
    projects_generated: int | None = Field(default=None, alias="projectsGenerated")
    ai_sectors_generated: int | None = Field(default=None, alias="aiSectorsGenerated")
    error: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        return cls(success=False, error=error)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
