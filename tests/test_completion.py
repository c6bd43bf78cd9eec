from __future__ import annotations

import pytest

from src.core.config.models import MalformedOutputPolicy
from src.core.exceptions import MalformedCompletion
from src.relay.completion import interpret_completion, parse_json, strip_fences


class TestStripFences:
    def test_json_fence_removed(self):
        assert strip_fences('```json\n{"reply":"hi"}\n```') == '{"reply":"hi"}'

    def test_unfenced_text_unchanged(self):
        text = '{"plan": [{"action": "BACK"}]}'
        assert strip_fences(text) == text

    def test_prose_unchanged(self):
        assert strip_fences("Sure, the weather is sunny.") == "Sure, the weather is sunny."

    def test_idempotent(self):
        once = strip_fences('```json\n{"reply":"hi"}\n```')
        assert strip_fences(once) == once

    def test_tolerates_surrounding_whitespace(self):
        assert strip_fences('  \n```json  \n{"a": 1}\n   ```  \n') == '{"a": 1}'

    def test_other_language_tag_and_bare_fence(self):
        assert strip_fences('```JSON\n[1, 2]\n```') == "[1, 2]"
        assert strip_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_crlf_line_endings(self):
        assert strip_fences('```json\r\n{"a": 1}\r\n```') == '{"a": 1}'

    def test_inner_content_not_altered(self):
        inner = '{"reply": "use ```code``` blocks\\n"}'
        assert strip_fences(f"```json\n{inner}\n```") == inner

    def test_fence_without_newline_is_not_stripped(self):
        text = '```json{"a": 1}```'
        assert strip_fences(text) == text

    def test_only_opening_fence(self):
        assert strip_fences('```json\n{"a": 1}') == '{"a": 1}'


class TestInterpretCompletion:
    def test_valid_json_forwarded(self):
        body = interpret_completion('{"plan": [{"action": "OPEN_CAMERA"}]}', MalformedOutputPolicy.WRAP)
        assert body == {"plan": [{"action": "OPEN_CAMERA"}]}

    def test_nested_structure_preserved(self):
        text = '{"intents": [{"name": "alarm", "slots": {"time": "08:00", "days": [1, 2]}}]}'
        assert interpret_completion(text, MalformedOutputPolicy.FAIL) == {
            "intents": [{"name": "alarm", "slots": {"time": "08:00", "days": [1, 2]}}]
        }

    def test_wrap_policy_wraps_prose(self):
        assert interpret_completion("Sure, the weather is sunny.", MalformedOutputPolicy.WRAP) == {
            "reply": "Sure, the weather is sunny."
        }

    def test_fail_policy_raises_with_text(self):
        with pytest.raises(MalformedCompletion) as exc_info:
            interpret_completion("Sure, the weather is sunny.", MalformedOutputPolicy.FAIL)
        assert exc_info.value.text == "Sure, the weather is sunny."

    def test_empty_completion_is_malformed(self):
        assert interpret_completion("", MalformedOutputPolicy.WRAP) == {"reply": ""}

    def test_scalar_json_is_forwarded(self):
        assert interpret_completion("42", MalformedOutputPolicy.FAIL) == 42


class TestParseJson:
    @pytest.mark.parametrize("text", ["NaN", '{"value": Infinity}', "[-Infinity]"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(ValueError):
            parse_json(text)
