import dataclasses

import pytest

from shotliner.production import (
    CameraMetadata,
    MediaLink,
    MediaType,
    ProductionDepartment,
    Shot,
    ShotListEntry,
    ShotSetup,
    ShotSubType,
    ShotType,
)


def _setup():
    return ShotSetup(index=1, id="setup-a")


def test_shot_defaults_are_empty():
    shot = Shot(ShotType.WS, _setup())
    assert shot.subtype is None
    assert shot.camera_metadata is None
    assert shot.tags == []
    assert shot.media == []


def test_shot_lists_are_independent():
    first = Shot(ShotType.CU, _setup())
    second = Shot(ShotType.CU, _setup())
    first.tags.append("night")
    assert second.tags == []


def test_shot_holds_given_values():
    link = MediaLink("board.png")
    shot = Shot(
        ShotType.XCU,
        _setup(),
        subtype=ShotSubType.DOLLY,
        camera_metadata=CameraMetadata(lens_mm=50),
        tags=["hero"],
        media=[link],
    )
    assert shot.subtype is ShotSubType.DOLLY
    assert shot.camera_metadata.lens_mm == 50
    assert shot.media[0].media_type is MediaType.IMAGE


def test_setup_is_immutable():
    setup = _setup()
    with pytest.raises(dataclasses.FrozenInstanceError):
        setup.index = 2
    assert setup.index == 1
    assert setup.id == "setup-a"


def test_setup_equality():
    assert ShotSetup(3, "x") == ShotSetup(3, "x")
    assert ShotSetup(3, "x") != ShotSetup(4, "x")


def test_enum_lookup_by_value_round_trips():
    for member in ShotType:
        assert ShotType(member.value) is member
    for member in ProductionDepartment:
        assert ProductionDepartment(member.value) is member


def test_shot_list_entry_fields_round_trip():
    entry = ShotListEntry(
        completed=False,
        shot_number="1A",
        shot_type=ShotType.MS,
        shot_subtype=ShotSubType.PANNING,
        shot_setup="setup-a",
        scene_number="1",
        scene_environment="INT",
        scene_time="DAY",
        scene_location="KITCHEN",
        scene_sublocation="",
        group="",
        characters="ANNA",
        tags="",
        props="mug",
        estimated_setup_time="10",
    )
    rebuilt = ShotListEntry(**dataclasses.asdict(entry))
    assert rebuilt == entry