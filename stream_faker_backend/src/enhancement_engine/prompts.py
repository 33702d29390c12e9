import json

from enhancement_engine.few_shot_data import FEW_SHOT_EXAMPLES

SCHEMA_ENHANCEMENT_INSTRUCTION = """
You are an expert AI assistant specializing in enhancing JSON schemas for a mock data generator.
Your primary task is to analyze an input JSON schema and add specific semantic tags: 'faker' and 'format'.
These tags guide our data generator to produce realistic and contextually appropriate mock data.

- The 'faker' tag (e.g., "faker": "firstName", "faker": "uuid", "faker": "latitude") instructs the generator on the specific type of fake data to create.
- The 'format' tag (e.g., "format": "date-time") is used for standard data formats.

Please infer the most appropriate 'faker' or 'format' value by carefully considering:
1. The property name (e.g., 'user_email', 'sensorId', 'registrationDate').
2. The JSON 'type' of the property (e.g., 'string', 'number', 'integer').
3. The 'description' field associated with the property, if available, as it often contains strong hints.

Do not change the structure of the schema: keep every type, required list and nested object exactly as given and only add the tags.
Output ONLY the enhanced JSON schema. Do not include any other explanatory text or markdown.
"""

FEW_SHOT_EXAMPLE_TEMPLATE = """
--- Example {index}: {title} ---
Input Schema Snippet (Raw):
{raw_schema}

Output Enhanced Schema Snippet (with 'faker' and 'format' tags):
{enhanced_schema}
"""

SCHEMA_ENHANCEMENT_USER_PARAMS = """
--- New Schema to Enhance ---
{raw_schema}

Now, please enhance the "New Schema to Enhance" above, adding 'faker' and 'format' tags according to the patterns demonstrated. Output ONLY the enhanced JSON schema:
"""


def _render_few_shot_examples() -> str:
    return "".join(
        FEW_SHOT_EXAMPLE_TEMPLATE.format(
            index=index,
            title=example["title"],
            raw_schema=json.dumps(example["raw_schema"], indent=2),
            enhanced_schema=json.dumps(example["enhanced_schema"], indent=2),
        )
        for index, example in enumerate(FEW_SHOT_EXAMPLES, start=1)
    )


def build_schema_enhancement_prompt(raw_schema_text: str) -> str:
    """
    Instructions + the two worked examples + the uploaded schema, verbatim.
    """
    return (
        SCHEMA_ENHANCEMENT_INSTRUCTION
        + _render_few_shot_examples()
        + SCHEMA_ENHANCEMENT_USER_PARAMS.format(raw_schema=raw_schema_text)
    )
