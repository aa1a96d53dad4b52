import pytest
from bedrock_review.models.review import NO_FEEDBACK
from bedrock_review.review.prompts import REVIEW_INSTRUCTIONS, build_review_prompt


@pytest.mark.unit
def test_build_prompt_includes_patch():
    patch = "@@ -1 +1,2 @@\n+print('world')"
    prompt = build_review_prompt(patch)

    assert prompt.endswith(f"\n\nPatch:\n{patch}")
    assert "Review only added, edited or deleted lines." in prompt


@pytest.mark.unit
def test_build_prompt_is_deterministic():
    patch = "+ console.log('debug')"
    assert build_review_prompt(patch) == build_review_prompt(patch)


@pytest.mark.unit
def test_instruction_template_has_no_sentinel():
    assert NO_FEEDBACK not in REVIEW_INSTRUCTIONS


@pytest.mark.unit
def test_built_prompt_tells_model_the_sentinel():
    prompt = build_review_prompt("")
    assert f"write only '{NO_FEEDBACK}'" in prompt
    assert prompt.endswith("Patch:\n")
