# shotliner

`shotliner` is the data model behind a lined script. A lined script is a
screenplay with its planned shots drawn over the text. The package holds
shot lines, production tags and tagged screenplay elements. It keys each of
them by `uuid.UUID` in an annotation map. It also has a small command history
cursor. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `shotliner.production`

This module holds the production vocabulary.

- Enums: `ProductionDepartment`, `ShotType`, `ShotSubType` and `MediaType`.
  - `ShotType` runs from `XWS` to `XCU`.
  - `MediaType` has only `IMAGE`.
- `ShotSetup(index, id)`, `CameraMetadata(lens_mm)` and
  `MediaLink(filepath, media_type=MediaType.IMAGE)` are frozen dataclasses.
- `Shot(shot_type, setup, subtype=None, camera_metadata=None, tags=[], media=[])`.
- `ShotListEntry` is a plain row record with the fields of one shot-list
  line, such as shot number, scene details, characters and props.

### `shotliner.commands`

This module defines the command records:

- `AddShotline(shotline_id, shotline)`
- `RemoveShotline(shotline_id, old_shotline=None)`
- `ModifyShotline(shotline_id, old_shotline=None)`
- `AddTag(tag_id, tag)`
- `ModifyTag(tag_id, old_tag=None)`
- `RemoveTag(tag_id, old_tag=None)`

`CommandHistory(max_history_size)` is a cursor with `index`,
`current_history_size` and a `history` deque. Its methods are:

- `execute()` advances `index` and returns
  `CommandHistoryStatus.EXECUTE_SUCCESS`. Once `index` has reached
  `max_history_size` it raises `HistoryLimitError` instead.
- `undo()` steps `index` back. It never goes below zero.
- `redo()` steps `index` forward while `index + 1 <= current_history_size`.

The history does not store commands or run them by itself. Filling `history`
and `current_history_size` is up to the caller.

### `shotliner.document`

This module holds the document model:

- `ScreenplayCoordinate(page, line)` is frozen.
- `Scene`.
- `Tag(tag_str, departments=[])`.
- `TaggedElement(origin, endpoint, tags=[])`. The range is inclusive, and
  `tags` holds tag ids.
- `ShotLine(start, end, shot, unfilmed_lines=[])`.
- `AnnotationMap` has `shotlines`, `tags` and `tagged_elements`. Each one is
  a dict keyed by UUID.
- `ShotlinerDoc(command_history, screenplay=None, annotation_map=AnnotationMap())`.

The edit functions change `document.annotation_map`:

| Function | Arguments |
| --- | --- |
| `add_shotline` | `(document, shotline, shotline_id)` |
| `modify_shotline` | `(document, shotline_id, shotline)` |
| `remove_shotline` | `(document, shotline_id)` |
| `add_tag` | `(document, tag, tag_id)` |
| `modify_tag` | `(document, tag, tag_id)` |
| `remove_tag` | `(document, tag_id)` |
| `add_tagged_element` | `(document, element_id, element)` |
| `modify_tagged_element` | `(document, element_id, element)` |
| `remove_tagged_element` | `(document, element_id)` |

These functions raise `AnnotationError` in two cases:

- An *add* call uses an id that is already present.
- A *modify* or *remove* call uses an id that is not present.

The methods on `ShotlinerDoc` handle only some commands:

- `ShotlinerDoc.command_exec(cmd)` adds the shot line for an `AddShotline`.
  It accepts a `ModifyShotline` and leaves the document unchanged. It raises
  `AnnotationError` for any other command.
- `ShotlinerDoc.command_undo(cmd)` removes the shot line of an `AddShotline`.
  It raises `AnnotationError` for any other command.

## Example

```python
from uuid import uuid4

from shotliner.commands import AddShotline, CommandHistory
from shotliner.document import ScreenplayCoordinate, ShotLine, ShotlinerDoc
from shotliner.production import Shot, ShotSetup, ShotType

doc = ShotlinerDoc(command_history=CommandHistory(max_history_size=50))
line = ShotLine(
    start=ScreenplayCoordinate(page=3, line=7),
    end=ScreenplayCoordinate(page=3, line=12),
    shot=Shot(shot_type=ShotType.MS, setup=ShotSetup(index=1, id="A")),
)
cmd = AddShotline(uuid4(), line)
doc.command_exec(cmd)   # the shot line is now in doc.annotation_map.shotlines
doc.command_undo(cmd)   # and now it is gone again
```

## What it does not do

- The package does not read or parse screenplays. `ShotlinerDoc.screenplay`
  is an opaque slot that the package never inspects.
- It does not save or load documents.
- It does not build shot-list tables or export to CSV or any other format.
  `ShotListEntry` is only the row type.
- It has no command-line tool and no user interface.

## Running the tests

```
pytest
```