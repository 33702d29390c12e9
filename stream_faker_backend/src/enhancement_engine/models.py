from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class EnhancementResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    enhanced_schema: Dict[str, Any] = Field(alias="enhancedSchema")
    # True when the LLM was not configured and the schema passed through
    skipped: bool = Field(default=False, exclude=True)
