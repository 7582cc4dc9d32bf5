import json

import pytest

from utils.response_utils import DeleteResult, JsonResult, format_result


def test_json_result_single_text_block():
    content = format_result(JsonResult([{"id": 1, "name": "Ünïcode"}]))
    assert len(content) == 1
    assert json.loads(content[0].text) == [{"id": 1, "name": "Ünïcode"}]
    assert "\n  " in content[0].text


@pytest.mark.parametrize(
    "subject,success,message",
    [
        ("Grid", True, "Grid successfully deleted."),
        ("Grid", False, "Failed to delete grid."),
        ("Record(s)", True, "Record(s) successfully deleted."),
        ("Record(s)", False, "Failed to delete record(s)."),
    ],
)
def test_delete_messages(subject, success, message):
    assert format_result(DeleteResult(subject, success))[0].text == message


def test_unsupported_result():
    with pytest.raises(TypeError):
        format_result({"raw": "dict"})
