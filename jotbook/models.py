"""Core Pydantic value models for jotbook."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TextColor(str, Enum):
    NONE = "none"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class DisplayFormat(str, Enum):
    BOXED = "boxed"
    DATES = "dates"
    JSON = "json"
    MARKDOWN = "markdown"
    PRETTY = "pretty"
    SHORT = "short"
    TAGS = "tags"
    TEXT = "text"
    XML = "xml"
    YAML = "yaml"


DISPLAY_FORMAT_ALIASES = {
    "md": DisplayFormat.MARKDOWN,
    "txt": DisplayFormat.TEXT,
    "yml": DisplayFormat.YAML,
}


class ColorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    body: TextColor = TextColor.NONE
    date: TextColor = TextColor.BLACK
    tags: TextColor = TextColor.YELLOW
    title: TextColor = TextColor.CYAN


class Entry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    time: datetime
    title: str
    body: str = ""
    tags: list[str] = Field(default_factory=list)
    starred: bool = False
