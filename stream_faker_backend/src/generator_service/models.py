from typing import Annotated, Any, Dict, Literal, Optional, TypedDict, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt


class _WireModel(BaseModel):
    # Field names are camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)


# --- Output sinks ---

class ConsoleOutput(_WireModel):
    type: Literal["console"] = "console"


class FileOutput(_WireModel):
    type: Literal["file"] = "file"
    file_path: str = Field(alias="filePath", min_length=1)


class KafkaSettings(_WireModel):
    bootstrap_servers: str = Field(alias="bootstrapServers", min_length=1)
    topic: str = Field(min_length=1)
    batch_size: Optional[PositiveInt] = Field(default=None, alias="batchSize")
    interval_ms: Optional[PositiveInt] = Field(default=None, alias="intervalMs")


class KafkaOutput(_WireModel):
    type: Literal["kafka"] = "kafka"
    kafka: KafkaSettings


OutputConfig = Annotated[
    Union[ConsoleOutput, FileOutput, KafkaOutput],
    Field(discriminator="type"),
]


# --- Generator service payloads ---

class GenerationRequest(_WireModel):
    schema_content: str = Field(alias="schemaContent")
    output_config: OutputConfig = Field(alias="outputConfig")
    max_messages: Optional[PositiveInt] = Field(default=None, alias="maxMessages")
    max_time_in_seconds: Optional[Union[PositiveInt, PositiveFloat]] = Field(default=None, alias="maxTimeInSeconds")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class GenerationHandle(TypedDict, total=False):
    """Issued by the generator service and relayed as-is."""

    streamId: Optional[str]
    status: Literal["SUBMITTED", "STARTED", "ERROR"]
    message: str
