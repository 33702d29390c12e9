from enhancement_engine.common import clean_json_string
from enhancement_engine.flows.schema_enhancement import (
    parse_raw_schema,
    run_schema_enhancement_flow,
)
from enhancement_engine.prompts import build_schema_enhancement_prompt

__all__ = [
    "run_schema_enhancement_flow",
    "parse_raw_schema",
    "build_schema_enhancement_prompt",
    "clean_json_string",
]
