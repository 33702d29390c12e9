from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from generator_service.models import OutputConfig


class StartGenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the endpoint so a missing field answers 400
    enhanced_schema: Optional[Dict[str, Any]] = Field(default=None, alias="enhancedSchema")
    output_config: Optional[OutputConfig] = Field(default=None, alias="outputConfig")
    max_messages: Optional[PositiveInt] = Field(default=None, alias="maxMessages")
    max_time_in_seconds: Optional[Union[PositiveInt, PositiveFloat]] = Field(default=None, alias="maxTimeInSeconds")
