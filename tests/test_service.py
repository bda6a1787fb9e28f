import pytest

from linkedinese.src.exceptions import InputValidationError, UpstreamError
from linkedinese.src.prompt import build_messages, few_shot_examples, system_prompt
from linkedinese.src.service import _first_content, validate_input

def test_validate_input_returns_untrimmed_text():
    req = validate_input({"text": "  I fixed a bug.  "})
    assert req.text == "  I fixed a bug.  "

@pytest.mark.parametrize("body", [None, "text", {}, {"text": 5}, {"text": "\n"}])
def test_validate_input_required(body):
    with pytest.raises(InputValidationError) as exc:
        validate_input(body)
    assert str(exc.value) == "Input text is required."
    assert exc.value.status_code == 400

def test_validate_input_length_counts_whitespace():
    with pytest.raises(InputValidationError) as exc:
        validate_input({"text": "x" + " " * 5000})
    assert str(exc.value) == "Input text cannot exceed 5000 characters."

def test_upstream_error_keeps_status():
    err = UpstreamError(429)
    assert err.status_code == 429
    assert str(err) == "Failed to get a response from the AI service."

def test_build_messages_order():
    messages = build_messages("We had a retro.")

    assert messages[0].role == "system"
    assert messages[0].content == system_prompt
    assert messages[1:-1] == few_shot_examples
    assert messages[-1].role == "user"
    assert messages[-1].content == "We had a retro."

def test_few_shot_turns_alternate():
    roles = [m.role for m in few_shot_examples]
    assert roles == ["user", "assistant"] * (len(roles) // 2)

def test_build_messages_is_deterministic():
    assert build_messages("same") == build_messages("same")

def _payload(*contents):
    return {"choices": [{"index": i, "message": {"role": "assistant", "content": c}} for i, c in enumerate(contents)]}

def test_first_content_trims():
    assert _first_content(_payload("  Hello World  ", "second")) == "Hello World"

def test_first_content_missing():
    assert _first_content({"choices": []}) == ""
    assert _first_content(_payload(None)) == ""
    assert _first_content({"choices": [{"message": None}]}) == ""

@pytest.mark.parametrize("data", ["<html>bad gateway</html>", ["choices"], {}, {"choices": None}])
def test_first_content_malformed(data):
    with pytest.raises(ValueError):
        _first_content(data)
