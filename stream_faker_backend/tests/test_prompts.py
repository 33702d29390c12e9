import json

from enhancement_engine.few_shot_data import FEW_SHOT_EXAMPLES
from enhancement_engine.prompts import build_schema_enhancement_prompt

RAW_SCHEMA = '{"type": "object", "properties": {"sensorId": {"type": "string"}}}'


def test_prompt_is_deterministic():
    assert build_schema_enhancement_prompt(RAW_SCHEMA) == build_schema_enhancement_prompt(RAW_SCHEMA)


def test_prompt_embeds_raw_schema_verbatim_after_examples():
    prompt = build_schema_enhancement_prompt(RAW_SCHEMA)

    heading = "--- New Schema to Enhance ---"
    assert prompt.count(heading) == 1
    tail = prompt.split(heading, 1)[1]
    assert tail.lstrip().startswith(RAW_SCHEMA)
    assert prompt.rstrip().endswith("Output ONLY the enhanced JSON schema:")


def test_prompt_contains_both_worked_examples():
    prompt = build_schema_enhancement_prompt(RAW_SCHEMA)

    assert len(FEW_SHOT_EXAMPLES) == 2
    assert "--- Example 1: Person Data ---" in prompt
    assert "--- Example 2: IoT Device Data ---" in prompt
    for example in FEW_SHOT_EXAMPLES:
        assert json.dumps(example["raw_schema"], indent=2) in prompt
        assert json.dumps(example["enhanced_schema"], indent=2) in prompt
    assert prompt.index("Example 2") < prompt.index("--- New Schema to Enhance ---")


def test_prompt_keeps_braces_in_schema_text():
    raw = '{"type": "object", "description": "{weird} {{braces}}"}'
    assert raw in build_schema_enhancement_prompt(raw)


def test_few_shot_examples_only_add_annotations():
    for example in FEW_SHOT_EXAMPLES:
        raw_props = example["raw_schema"]["properties"]
        enhanced_props = example["enhanced_schema"]["properties"]
        assert raw_props.keys() == enhanced_props.keys()
        for name, prop in enhanced_props.items():
            added = set(prop) - set(raw_props[name])
            assert added and added <= {"faker", "format"}
            assert {k: v for k, v in prop.items() if k in raw_props[name]} == raw_props[name]
