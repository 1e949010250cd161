from pydantic import BaseModel, ConfigDict


class MatrixModel(BaseModel):
    """Base for all SDK models. Unknown wire fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
