import json

import pytest

from utilkit.structgen import (
    Preferences,
    UserPreferences,
    generate_config_source,
    generate_go_struct,
    go_type,
    main,
)

SAMPLE = {
    "username": "alice",
    "theme": "dark",
    "notifications_enabled": True,
    "preferences": {"language": "en", "timezone": "UTC"},
}


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "bool"),
        (1.5, "float64"),
        (3, "float64"),
        ("text", "string"),
        ({"a": 1}, "struct"),
        ([{"a": 1}], "struct"),
        (["a"], "string"),
        ([], "interface{}"),
        (None, "interface{}"),
    ],
)
def test_go_type(value, expected):
    assert go_type(value) == expected


def test_user_preferences_round_trip():
    prefs = UserPreferences.from_dict(SAMPLE)
    assert prefs.username == "alice"
    assert prefs.preferences == Preferences(language="en", timezone="UTC")
    assert prefs.to_dict() == SAMPLE


def test_user_preferences_defaults():
    prefs = UserPreferences.from_dict({})
    assert prefs == UserPreferences()


def test_simple_field_line():
    assert generate_go_struct("    ", {"username": "alice"}) == (
        '    Username string `json:"username,omitempty"`\n'
    )


def test_nested_struct_lines():
    result = generate_go_struct("", {"preferences": {"language": "en"}})
    assert result.splitlines() == [
        "Preferences struct {",
        '  Language string `json:"language,omitempty"`',
        '} `json:"preferences,omitempty"`',
    ]


def test_underscore_key_keeps_lowercase_after_underscore():
    result = generate_go_struct("", {"notifications_enabled": True})
    assert result.startswith("Notifications_enabled bool ")


def test_null_and_arrays():
    obj = {"extra": None, "tags": ["go"], "empty": [], "items": [{"id": 1}]}
    lines = generate_go_struct("", obj).splitlines()
    assert lines[0].startswith("Extra *interface{} ")
    assert lines[1].startswith("Tags []string ")
    assert lines[2].startswith("Empty []interface{} ")
    assert lines[3] == "Items []struct {"
    assert lines[4].startswith("  Id float64 ")


def test_fields_follow_key_order():
    lines = generate_go_struct("", {"b": 1, "a": 2}).splitlines()
    assert [line.split()[0] for line in lines] == ["B", "A"]


def test_generate_config_source_wraps_fields():
    source = generate_config_source(SAMPLE)
    assert "// Code generated by generateconfig; DO NOT EDIT." in source
    assert "package config" in source
    assert "type UserPreferences struct {\n" in source
    assert generate_go_struct("    ", SAMPLE) in source
    assert source.endswith("}\n")


def test_main_writes_output(tmp_path, capsys):
    src = tmp_path / "user_preferences.json"
    out = tmp_path / "auto_generated.go"
    src.write_text(json.dumps(SAMPLE))
    assert main(["--input", str(src), "--output", str(out)]) == 0
    assert out.read_text() == generate_config_source(SAMPLE)
    assert "generated successfully" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "nope.json"), "--output", str(tmp_path / "o.go")]) == 1
    assert "Error reading JSON file" in capsys.readouterr().out


def test_main_invalid_json(tmp_path, capsys):
    src = tmp_path / "bad.json"
    src.write_text("{not json")
    out = tmp_path / "o.go"
    assert main(["--input", str(src), "--output", str(out)]) == 1
    assert "Error parsing JSON" in capsys.readouterr().out
    assert not out.exists()


def test_main_rejects_non_object(tmp_path):
    src = tmp_path / "list.json"
    src.write_text("[1, 2]")
    assert main(["--input", str(src), "--output", str(tmp_path / "o.go")]) == 1