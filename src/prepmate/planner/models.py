from pydantic import BaseModel, ConfigDict, Field


class StudyPlan(BaseModel):
    """A generated study plan together with the inputs it was built from.

    Replaced wholesale on every successful generation, never edited.
    """

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Target role")
    job_description: str = Field(description="Job description the plan targets")
    generated_plan: str = Field(description="Markdown study plan")
