"""Production vocabulary: departments, shots, camera setups and shot-list rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ProductionDepartment(Enum):
    """Departments that a tag can be assigned to."""

    PRODUCTION = "production"
    ART = "art"
    COSTUMES = "costumes"
    MAKEUP = "makeup"
    CAMERA = "camera"
    PROPS = "props"
    SPECIAL_FX = "special_fx"
    STUNTS = "stunts"
    ANIMALS = "animals"
    VEHICLES = "vehicles"


class ShotType(Enum):
    """Framing of a shot, from extra wide to extreme close-up."""

    XWS = "XWS"
    WS = "WS"
    MS = "MS"
    CU = "CU"
    XCU = "XCU"


class ShotSubType(Enum):
    """Camera movement or other refinement of a shot."""

    TRUCKING = "trucking"
    MOVING = "moving"
    DOLLY = "dolly"
    WHIP_PAN = "whip_pan"
    PANNING = "panning"
    OTHER = "other"


class MediaType(Enum):
    """Kinds of media that can be linked to a shot."""

    IMAGE = "image"


@dataclass(frozen=True)
class ShotSetup:
    """A specific, discrete position to place the camera."""

    index: int
    id: str


@dataclass(frozen=True)
class CameraMetadata:
    """Technical camera information for a shot."""

    lens_mm: int


@dataclass(frozen=True)
class MediaLink:
    """A reference to a media file attached to a shot."""

    filepath: str
    media_type: MediaType = MediaType.IMAGE


@dataclass
class Shot:
    """Composition and metadata of a single shot."""

    shot_type: ShotType
    setup: ShotSetup
    subtype: Optional[ShotSubType] = None
    camera_metadata: Optional[CameraMetadata] = None
    tags: List[str] = field(default_factory=list)
    media: List[MediaLink] = field(default_factory=list)


@dataclass
class ShotListEntry:
    """A single row of an exported shot list."""

    completed: bool
    shot_number: str
    shot_type: ShotType
    shot_subtype: ShotSubType
    shot_setup: str
    scene_number: str
    scene_environment: str
    scene_time: str
    scene_location: str
    scene_sublocation: str
    group: str
    characters: str
    tags: str
    props: str
    estimated_setup_time: str