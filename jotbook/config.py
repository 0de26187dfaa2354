"""Settings schema, YAML document mapping, and per-journal resolution."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jotbook import __version__
from jotbook.errors import ErrorKind, JournalError
from jotbook.models import DISPLAY_FORMAT_ALIASES, ColorConfig, DisplayFormat

Hour = Annotated[int, Field(ge=0, le=23)]
Minute = Annotated[int, Field(ge=0, le=59)]
IndentCharacter = Annotated[str, Field(min_length=1, max_length=1)]
LineWrap = Literal["auto"] | int
Template = Literal[False] | str

DEFAULT_JOURNAL = "default"


class JournalPath(BaseModel):
    """The ``journal: <path>`` variant, legal only inside an override block."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str

    def to_document(self) -> dict[str, Any]:
        return {"journal": self.path}


class StandardJournal(BaseModel):
    """A bare path entry under ``journals``; inherits every setting from the root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str

    def journal_file(self) -> str:
        return self.path

    def to_document(self) -> str:
        return self.path


class OverrideJournal(BaseModel):
    """A nested config block under ``journals`` that supersedes root settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    config: CommonConfig

    def journal_file(self) -> str:
        nested = self.config.journal_config
        if isinstance(nested, JournalPath):
            return nested.path
        raise JournalError(
            ErrorKind.INVALID_JRNL_OVERRIDE_CONFIG,
            "override block must set a single 'journal' path",
        )

    def to_document(self) -> dict[str, Any]:
        return self.config.to_document()


class JournalMap(BaseModel):
    """The ``journals`` variant: ordered journal name to standard path or override block."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    journals: dict[str, StandardJournal | OverrideJournal] = Field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        return {"journals": {name: journal.to_document() for name, journal in self.journals.items()}}


def decode_journal_config(name: str, raw: Any) -> StandardJournal | OverrideJournal:
    if isinstance(raw, str):
        return StandardJournal(path=raw)
    if isinstance(raw, dict):
        return OverrideJournal(config=CommonConfig.model_validate(raw))
    raise ValueError(f"journal '{name}' must be a path string or a mapping, got {type(raw).__name__}")


def decode_journal_configs(data: dict[str, Any]) -> JournalMap | JournalPath:
    if "journals" in data and "journal" in data:
        raise ValueError("set either 'journal' or 'journals', not both")
    if "journals" in data:
        raw = data["journals"]
        if not isinstance(raw, dict):
            raise ValueError("'journals' must map journal names to a path or a config block")
        return JournalMap(journals={str(name): decode_journal_config(str(name), value) for name, value in raw.items()})
    raw = data["journal"]
    if not isinstance(raw, str):
        raise ValueError("'journal' must be a path string")
    return JournalPath(path=raw)


class CommonConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    colors: ColorConfig | None = None
    default_hour: Hour | None = None
    default_minute: Minute | None = None
    display_format: DisplayFormat | None = None
    editor: str | None = None
    encrypt: bool | None = None
    highlight: bool | None = None
    indent_character: IndentCharacter | None = None
    journal_config: JournalMap | JournalPath | None = None
    linewrap: LineWrap | None = None
    tagsymbols: str | None = None
    template: Template | None = None
    timeformat: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _decode_journal_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if not isinstance(data.get("journal_config"), (JournalMap, JournalPath, type(None))):
            raise ValueError("unknown key 'journal_config'; use 'journals' or 'journal'")
        if "journals" not in data and "journal" not in data:
            return data
        decoded = {key: value for key, value in data.items() if key not in ("journals", "journal")}
        decoded["journal_config"] = decode_journal_configs(data)
        return decoded

    @field_validator("display_format", mode="before")
    @classmethod
    def _expand_display_alias(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DISPLAY_FORMAT_ALIASES.get(value, value)
        return value

    @classmethod
    def builtin(cls) -> CommonConfig:
        return cls(
            colors=ColorConfig(),
            default_hour=9,
            default_minute=0,
            display_format=DisplayFormat.TEXT,
            encrypt=False,
            highlight=True,
            indent_character="|",
            linewrap=79,
            tagsymbols="#@",
            template=False,
            timeformat="%F %r",
        )

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "journal_config":
                document.update(value.to_document())
            elif isinstance(value, BaseModel):
                document[name] = value.model_dump(mode="json")
            elif isinstance(value, Enum):
                document[name] = value.value
            else:
                document[name] = value
        return document


OverrideJournal.model_rebuild()
JournalMap.model_rebuild()
CommonConfig.model_rebuild()

BUILTIN_DEFAULTS = CommonConfig.builtin()

_RESOLVABLE_FIELDS = frozenset(name for name in CommonConfig.model_fields if name != "journal_config")


def first_present(*candidates: Any) -> Any:
    """Return the first candidate that is not ``None``."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _default_version() -> str:
    return f"v{__version__}"


class Settings(BaseModel):
    """Root settings for one invocation.

    Every query is scoped to a single journal and walks the chain
    journal override -> root config -> built-in defaults for that one field.
    Nothing is merged ahead of time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    config: CommonConfig = Field(default_factory=CommonConfig)
    version: str = Field(default_factory=_default_version)

    @classmethod
    def default(cls) -> Settings:
        return cls(config=CommonConfig.builtin())

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Settings:
        body = dict(document)
        version = body.pop("version", None)
        config = CommonConfig.model_validate(body)
        if version is None:
            return cls(config=config)
        return cls(config=config, version=str(version))

    def to_document(self) -> dict[str, Any]:
        document = self.config.to_document()
        document["version"] = self.version
        return document

    def with_journal(self, journal_name: str, journal_path: str) -> Settings:
        override = OverrideJournal(config=CommonConfig(journal_config=JournalPath(path=journal_path)))
        config = self.config.model_copy(update={"journal_config": JournalMap(journals={journal_name: override})})
        return self.model_copy(update={"config": config})

    def journal_names(self) -> list[str]:
        configs = self.config.journal_config
        if configs is None:
            return []
        if not isinstance(configs, JournalMap):
            raise JournalError(ErrorKind.TOP_LEVEL_JOURNAL_CONFIG)
        return list(configs.journals)

    def journal_settings(self, journal_name: str) -> tuple[CommonConfig, str]:
        """Return the scope config and file path for ``journal_name``."""
        configs = self.config.journal_config
        if configs is None:
            raise JournalError(ErrorKind.MISSING_JOURNAL_CONFIG, "no journals are configured")
        if not isinstance(configs, JournalMap):
            raise JournalError(ErrorKind.TOP_LEVEL_JOURNAL_CONFIG)

        journal = configs.journals.get(journal_name)
        if journal is None:
            raise JournalError(ErrorKind.MISSING_JOURNAL_CONFIG, journal_name)
        if isinstance(journal, OverrideJournal):
            return journal.config, journal.journal_file()
        return self.config, journal.journal_file()

    def resolve(self, field: str, journal_name: str) -> Any:
        if field not in _RESOLVABLE_FIELDS:
            raise ValueError(f"Unknown setting: {field}")
        scope, _ = self.journal_settings(journal_name)
        value = first_present(
            getattr(scope, field),
            getattr(self.config, field),
            getattr(BUILTIN_DEFAULTS, field),
        )
        if value is None:
            raise JournalError(
                ErrorKind.INVALID_JRNL_OVERRIDE_CONFIG,
                f"'{field}' is not set for journal '{journal_name}'",
            )
        return value

    def journal_file(self, journal_name: str) -> str:
        _, path = self.journal_settings(journal_name)
        return path

    def colors(self, journal_name: str) -> ColorConfig:
        return self.resolve("colors", journal_name)

    def default_hour(self, journal_name: str) -> int:
        return self.resolve("default_hour", journal_name)

    def default_minute(self, journal_name: str) -> int:
        return self.resolve("default_minute", journal_name)

    def display_format(self, journal_name: str) -> DisplayFormat:
        return self.resolve("display_format", journal_name)

    def editor(self, journal_name: str) -> str:
        return self.resolve("editor", journal_name)

    def encrypt(self, journal_name: str) -> bool:
        return self.resolve("encrypt", journal_name)

    def highlight(self, journal_name: str) -> bool:
        return self.resolve("highlight", journal_name)

    def indent_character(self, journal_name: str) -> str:
        return self.resolve("indent_character", journal_name)

    def linewrap(self, journal_name: str) -> int | str:
        return self.resolve("linewrap", journal_name)

    def tagsymbols(self, journal_name: str) -> str:
        return self.resolve("tagsymbols", journal_name)

    def template(self, journal_name: str) -> bool | str:
        return self.resolve("template", journal_name)

    def timeformat(self, journal_name: str) -> str:
        return self.resolve("timeformat", journal_name)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def parse_document(text: str, source: str = "<string>") -> dict[str, Any]:
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {source} must decode to a mapping")
    return data


def dump_settings(settings: Settings) -> str:
    return yaml.safe_dump(settings.to_document(), sort_keys=False, default_flow_style=False, allow_unicode=True)


def load_effective_settings(document: dict[str, Any], runtime_override: dict[str, Any] | None = None) -> Settings:
    """Load settings with precedence runtime override > config file document."""
    merged = dict(document)
    if runtime_override:
        merged = deep_merge(merged, runtime_override)
    return Settings.from_document(merged)
