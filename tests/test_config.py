import pytest
from pydantic import ValidationError

from jotbook.config import (
    CommonConfig,
    JournalMap,
    JournalPath,
    OverrideJournal,
    Settings,
    StandardJournal,
    deep_merge,
    dump_settings,
    first_present,
    load_effective_settings,
    parse_document,
)
from jotbook.errors import ErrorKind, JournalError
from jotbook.models import ColorConfig, DisplayFormat, TextColor

YAML_STR = """colors:
  body: none
  date: black
  tags: yellow
  title: cyan
default_hour: 9
default_minute: 0
editor: vim
encrypt: false
highlight: true
indent_character: '|'
journals:
  default:
    journal: /path/to/journal.txt
  food: ~/my_recipes.txt
  work:
    encrypt: true
    journal: ~/work.txt
linewrap: 79
tagsymbols: '%#@'
template: false
timeformat: '%F %r'
version: v4.1
"""


def sample_settings() -> Settings:
    other = OverrideJournal(
        config=CommonConfig.builtin().model_copy(
            update={
                "default_hour": 4,
                "default_minute": 20,
                "encrypt": True,
                "journal_config": JournalPath(path="/path/to/other.txt"),
            }
        )
    )
    journals = JournalMap(
        journals={
            "default": StandardJournal(path="/path/to/default.txt"),
            "other": other,
        }
    )
    return Settings(config=CommonConfig.builtin().model_copy(update={"journal_config": journals}))


def test_sample_document_deserializes() -> None:
    settings = Settings.from_document(parse_document(YAML_STR))

    assert settings.version == "v4.1"
    assert settings.journal_names() == ["default", "food", "work"]
    assert settings.editor("food") == "vim"
    assert settings.tagsymbols("work") == "%#@"


def test_sample_document_round_trips_byte_identical() -> None:
    settings = Settings.from_document(parse_document(YAML_STR))
    assert dump_settings(settings) == YAML_STR


def test_default_settings_round_trip() -> None:
    settings = Settings.default()
    restored = Settings.from_document(parse_document(dump_settings(settings)))
    assert restored == settings


def test_journal_file_for_standard_and_override_journals() -> None:
    settings = Settings.from_document(parse_document(YAML_STR))

    assert settings.journal_file("default") == "/path/to/journal.txt"
    assert settings.journal_file("food") == "~/my_recipes.txt"
    assert settings.journal_file("work") == "~/work.txt"

    with pytest.raises(JournalError) as excinfo:
        settings.journal_file("foobar")
    assert excinfo.value.kind == ErrorKind.MISSING_JOURNAL_CONFIG


def test_toplevel_defaults_and_override_fallback() -> None:
    settings = sample_settings()

    assert settings.default_hour("default") == 9
    assert settings.default_hour("other") == 4
    assert settings.default_minute("default") == 0
    assert settings.default_minute("other") == 20
    assert settings.encrypt("default") is False
    assert settings.encrypt("other") is True
    assert settings.highlight("default") is True
    assert settings.highlight("other") is True


def test_override_inherits_root_before_builtin_defaults() -> None:
    settings = Settings.from_document(
        parse_document(
            """
linewrap: 120
journals:
  work:
    journal: ~/work.txt
"""
        )
    )

    assert settings.linewrap("work") == 120
    assert settings.timeformat("work") == "%F %r"
    assert settings.template("work") is False
    assert settings.colors("work") == ColorConfig()
    assert settings.display_format("work") == DisplayFormat.TEXT


def test_editor_has_no_builtin_default() -> None:
    settings = sample_settings()
    with pytest.raises(JournalError) as excinfo:
        settings.editor("default")
    assert excinfo.value.kind == ErrorKind.INVALID_JRNL_OVERRIDE_CONFIG


def test_toplevel_journal_path_fails_every_query() -> None:
    settings = Settings.from_document({"journal": "/path/to/journal.txt", "encrypt": False})

    for query in (settings.encrypt, settings.timeformat, settings.journal_file, settings.colors):
        with pytest.raises(JournalError) as excinfo:
            query("default")
        assert excinfo.value.kind == ErrorKind.TOP_LEVEL_JOURNAL_CONFIG

    with pytest.raises(JournalError) as excinfo:
        settings.journal_names()
    assert excinfo.value.kind == ErrorKind.TOP_LEVEL_JOURNAL_CONFIG


def test_no_journals_configured_has_no_names() -> None:
    assert Settings.default().journal_names() == []


def test_override_without_journal_path_is_invalid() -> None:
    settings = Settings.from_document(
        {
            "journals": {
                "nested": {"journals": {"inner": "/tmp/inner.txt"}},
                "pathless": {"encrypt": True},
            }
        }
    )

    for name in ("nested", "pathless"):
        with pytest.raises(JournalError) as excinfo:
            settings.encrypt(name)
        assert excinfo.value.kind == ErrorKind.INVALID_JRNL_OVERRIDE_CONFIG


def test_no_journals_configured_is_missing_journal_config() -> None:
    with pytest.raises(JournalError) as excinfo:
        Settings.default().journal_file("default")
    assert excinfo.value.kind == ErrorKind.MISSING_JOURNAL_CONFIG


def test_partial_colors_fill_remaining_defaults() -> None:
    settings = Settings.from_document({"colors": {"title": "green"}, "journals": {"default": "/tmp/j.txt"}})
    colors = settings.colors("default")
    assert colors.title == TextColor.GREEN
    assert colors.tags == TextColor.YELLOW


def test_display_format_aliases() -> None:
    config = CommonConfig.model_validate({"display_format": "md"})
    assert config.display_format == DisplayFormat.MARKDOWN
    assert CommonConfig.model_validate({"display_format": "yml"}).display_format == DisplayFormat.YAML


@pytest.mark.parametrize(
    "document",
    [
        {"unknown_key": 1},
        {"default_hour": 24},
        {"indent_character": "||"},
        {"linewrap": "wide"},
        {"colors": {"title": "chartreuse"}},
        {"journals": ["a", "b"]},
        {"journals": {"bad": 3}},
        {"journal": "/a.txt", "journals": {"b": "/b.txt"}},
    ],
)
def test_schema_rejects_invalid_documents(document: dict) -> None:
    with pytest.raises(ValidationError):
        Settings.from_document(document)


def test_linewrap_accepts_auto() -> None:
    settings = Settings.from_document({"linewrap": "auto", "journals": {"default": "/tmp/j.txt"}})
    assert settings.linewrap("default") == "auto"


def test_with_journal_builds_override_block() -> None:
    settings = Settings.default().with_journal("default", "/data/journal.txt")
    document = settings.to_document()

    assert document["journals"] == {"default": {"journal": "/data/journal.txt"}}
    assert settings.journal_file("default") == "/data/journal.txt"


def test_runtime_override_takes_precedence() -> None:
    document = parse_document(YAML_STR)
    runtime = {"encrypt": True, "colors": {"title": "green"}}

    settings = load_effective_settings(document, runtime_override=runtime)

    assert settings.encrypt("food") is True
    assert settings.colors("food").title == TextColor.GREEN
    assert settings.colors("food").body == TextColor.NONE


def test_deep_merge_merges_nested_tables() -> None:
    merged = deep_merge({"colors": {"body": "blue"}, "editor": "vim"}, {"colors": {"title": "red"}})
    assert merged == {"colors": {"body": "blue", "title": "red"}, "editor": "vim"}


def test_first_present_keeps_false_values() -> None:
    assert first_present(None, False, True) is False
    assert first_present(None, None) is None


def test_parse_document_rejects_non_mapping() -> None:
    assert parse_document("") == {}
    with pytest.raises(ValueError):
        parse_document("- a\n- b\n", source="list.yaml")


def test_journal_error_message_names_detail() -> None:
    error = JournalError(ErrorKind.MISSING_JOURNAL_CONFIG, "work")
    assert str(error) == "no such journal configured: work"
    assert str(JournalError(ErrorKind.TOP_LEVEL_JOURNAL_CONFIG)) == "illegal 'journal' key found at top level"
