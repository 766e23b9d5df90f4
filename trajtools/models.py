"""Message types for stamped poses, odometry and visualisation markers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable


@dataclass(frozen=True)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """An orientation as a unit quaternion; identity by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Pose:
    """A position and an orientation."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class Header:
    """Coordinate frame and time stamp (seconds) of a message."""

    frame_id: str = ""
    stamp: float = 0.0


@dataclass
class PoseStamped:
    """A pose with the header it was recorded under."""

    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


@dataclass
class Odometry:
    """An odometry reading: the estimated pose of a moving frame."""

    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    pose: Pose = field(default_factory=Pose)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass
class Marker:
    """A visualisation marker."""

    ARROW: ClassVar[int] = 0
    LINE_STRIP: ClassVar[int] = 4
    ADD: ClassVar[int] = 0

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: int = ARROW
    action: int = ADD
    scale: Point = field(default_factory=Point)
    color: Color = field(default_factory=Color)
    points: list[Point] = field(default_factory=list)


@dataclass
class MarkerArray:
    """A batch of markers published together."""

    markers: list[Marker] = field(default_factory=list)


@dataclass
class ServiceResponse:
    """Outcome of a save or load request."""

    success: bool
    message: str


def line_strip_marker(
    trajectory: Iterable[PoseStamped],
    header: Header,
    namespace: str,
    color: Color,
) -> Marker:
    """Build a line-strip marker through the positions of a trajectory."""
    return Marker(
        header=replace(header),
        ns=namespace,
        id=0,
        type=Marker.LINE_STRIP,
        action=Marker.ADD,
        scale=Point(x=0.02),
        color=color,
        points=[pose.pose.position for pose in trajectory],
    )