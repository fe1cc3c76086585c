"""The annotated screenplay document and the operations that edit it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

from shotliner.commands import AddShotline, Command, CommandHistory, ModifyShotline
from shotliner.production import ProductionDepartment, Shot


class AnnotationError(Exception):
    """Raised when an annotation cannot be added, changed or removed."""


@dataclass(frozen=True)
class ScreenplayCoordinate:
    page: int
    line: int


@dataclass
class Scene:
    start: ScreenplayCoordinate
    end: ScreenplayCoordinate
    story_location: str
    story_time_of_day: str
    real_time_of_day: str
    story_sublocation: Optional[str] = None
    real_locations: List[str] = field(default_factory=list)
    real_sublocations: Optional[List[str]] = None


@dataclass
class Tag:
    """A label tied to one or more production departments."""

    tag_str: str
    departments: List[ProductionDepartment] = field(default_factory=list)


@dataclass
class TaggedElement:
    """A range of screenplay lines (inclusive) carrying tag ids."""

    origin: ScreenplayCoordinate
    endpoint: ScreenplayCoordinate
    tags: List[UUID] = field(default_factory=list)


@dataclass
class ShotLine:
    start: ScreenplayCoordinate
    end: ScreenplayCoordinate
    shot: Shot
    unfilmed_lines: List[ScreenplayCoordinate] = field(default_factory=list)


@dataclass
class AnnotationMap:
    shotlines: Dict[UUID, ShotLine] = field(default_factory=dict)
    tags: Dict[UUID, Tag] = field(default_factory=dict)
    tagged_elements: Dict[UUID, TaggedElement] = field(default_factory=dict)


@dataclass
class ShotlinerDoc:
    """A screenplay together with its annotations and command history."""

    command_history: CommandHistory
    screenplay: Any = None
    annotation_map: AnnotationMap = field(default_factory=AnnotationMap)

    def command_exec(self, cmd: Command) -> None:
        """Apply a command to the document."""
        if isinstance(cmd, AddShotline):
            add_shotline(self, cmd.shotline, cmd.shotline_id)
        elif isinstance(cmd, ModifyShotline):
            return
        else:
            raise AnnotationError(f"cannot execute {type(cmd).__name__}")

    def command_undo(self, cmd: Command) -> None:
        """Reverse a command previously applied to the document."""
        if isinstance(cmd, AddShotline):
            remove_shotline(self, cmd.shotline_id)
        else:
            raise AnnotationError(f"cannot undo {type(cmd).__name__}")


def _insert_new(table: dict, key: UUID, value: Any, kind: str) -> None:
    if key in table:
        raise AnnotationError(f"{kind} {key} already exists")
    table[key] = value


def _replace_existing(table: dict, key: UUID, value: Any, kind: str) -> None:
    if key not in table:
        raise AnnotationError(f"{kind} {key} does not exist")
    table[key] = value


def _remove_existing(table: dict, key: UUID, kind: str) -> None:
    try:
        del table[key]
    except KeyError:
        raise AnnotationError(f"{kind} {key} does not exist") from None


def add_tagged_element(document: ShotlinerDoc, element_id: UUID, element: TaggedElement) -> None:
    _insert_new(document.annotation_map.tagged_elements, element_id, element, "tagged element")


def modify_tagged_element(document: ShotlinerDoc, element_id: UUID, element: TaggedElement) -> None:
    _replace_existing(document.annotation_map.tagged_elements, element_id, element, "tagged element")


def remove_tagged_element(document: ShotlinerDoc, element_id: UUID) -> None:
    _remove_existing(document.annotation_map.tagged_elements, element_id, "tagged element")


def add_tag(document: ShotlinerDoc, tag: Tag, tag_id: UUID) -> None:
    _insert_new(document.annotation_map.tags, tag_id, tag, "tag")


def modify_tag(document: ShotlinerDoc, tag: Tag, tag_id: UUID) -> None:
    _replace_existing(document.annotation_map.tags, tag_id, tag, "tag")


def remove_tag(document: ShotlinerDoc, tag_id: UUID) -> None:
    _remove_existing(document.annotation_map.tags, tag_id, "tag")


def add_shotline(document: ShotlinerDoc, shotline: ShotLine, shotline_id: UUID) -> None:
    _insert_new(document.annotation_map.shotlines, shotline_id, shotline, "shotline")


def modify_shotline(document: ShotlinerDoc, shotline_id: UUID, shotline: ShotLine) -> None:
    _replace_existing(document.annotation_map.shotlines, shotline_id, shotline, "shotline")


def remove_shotline(document: ShotlinerDoc, shotline_id: UUID) -> None:
    _remove_existing(document.annotation_map.shotlines, shotline_id, "shotline")