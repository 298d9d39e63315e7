import io
import os
import pytest
from yaml2obj.loader import YamlLoaderWithLineNumber
from yaml2obj.writer import YamlWriter, format_scalar

# 　Write YAML and read it with line numbers


def test_yaml_read_write():
    b = make_sample_yaml()
    v = YamlLoaderWithLineNumber.from_string(b)
    line_info = v["__line__"]
    assert v["key0"] == "value0"
    assert line_info["key0"] == 1
    assert line_info["key1"] == 2
    assert line_info["__begin__"] == 1
    assert v["key1"]["key11"] == "value11"
    assert v["key1"]["__line__"]["key11"] == 3


# expected yaml
# key0: value0
# key1:
#  key11: value11

def make_sample_yaml() -> str:
    s = io.StringIO()
    writer = YamlWriter(s)
    writer.name("key0").value("value0")
    writer.name("key1").begin_object()
    writer.name("key11").value("value11")
    writer.end_object()
    return s.getvalue()


def test_scalars_read_back_as_written():
    s = io.StringIO()
    writer = YamlWriter(s)
    writer.name("version").value("1.0")
    writer.name("flag").value(True)
    writer.name("nothing").value(None)
    writer.name("count").value(3)
    writer.name("ratio").value(0.25)
    writer.name("text").value("a: b")
    writer.name("empty").value([])

    v = YamlLoaderWithLineNumber.from_string(s.getvalue())
    assert v["version"] == "1.0"
    assert v["flag"] is True
    assert v["nothing"] is None
    assert v["count"] == 3
    assert v["ratio"] == 0.25
    assert v["text"] == "a: b"
    assert v["empty"] == []


def test_array_of_objects():
    s = io.StringIO()
    writer = YamlWriter(s)
    writer.comment("items")
    writer.name("items").begin_array()
    for i in range(2):
        writer.begin_object()
        writer.name("id").value(i)
        writer.end_object()
    writer.end_array()

    v = YamlLoaderWithLineNumber.from_string(s.getvalue())
    assert [e["id"] for e in v["items"]] == [0, 1]


def test_format_scalar():
    assert format_scalar("plain") == "plain"
    assert format_scalar(False) == "false"
    assert format_scalar(None) == "null"
    assert format_scalar("1.0") == "'1.0'"


def test_end_object_at_top_level():
    writer = YamlWriter(io.StringIO())
    with pytest.raises(Exception, match="level is already 0"):
        writer.end_object()


def test_from_file(tmp_path):
    path = tmp_path / "conf.yml"
    path.write_text("a: 1\n")
    v = YamlLoaderWithLineNumber.from_file(str(path))
    assert v["a"] == 1
    assert v["__fullpath__"] == os.path.abspath(str(path))


def test_from_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    v = YamlLoaderWithLineNumber.from_file(str(path))
    assert v["__line__"] == {"__begin__": 1}
