"""Loading trajectories from JSON, CSV and YAML files and republishing them."""

from __future__ import annotations

import json
import os
import time
from typing import Any, Callable, Optional, Union

import yaml

from trajtools.models import (
    Color,
    Header,
    MarkerArray,
    Point,
    Pose,
    PoseStamped,
    Quaternion,
    ServiceResponse,
    line_strip_marker,
)

PathLike = Union[str, "os.PathLike[str]"]

LOADED_NAMESPACE = "loaded_trajectory"
LOADED_FRAME = "odom"
LOADED_COLOR = Color(r=0.0, g=1.0, b=0.0, a=1.0)


class UnsupportedFormatError(ValueError):
    """Raised when a trajectory format is not one of json, csv or yaml."""


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        raise TypeError(f"expected a string, got {value!r}")
    return value if isinstance(value, str) else str(value)


def _mapping(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be a mapping, got {value!r}")
    return value


def pose_from_dict(data: Any) -> PoseStamped:
    """Build a stamped pose from the nested mapping it is stored as."""
    data = _mapping(data, "pose entry")
    header = _mapping(data["header"], "header")
    pose = _mapping(data["pose"], "pose")
    position = _mapping(pose["position"], "position")
    orientation = _mapping(pose["orientation"], "orientation")
    return PoseStamped(
        header=Header(frame_id=_text(header["frame_id"])),
        pose=Pose(
            position=Point(
                x=_number(position["x"]),
                y=_number(position["y"]),
                z=_number(position["z"]),
            ),
            orientation=Quaternion(
                x=_number(orientation["x"]),
                y=_number(orientation["y"]),
                z=_number(orientation["z"]),
                w=_number(orientation["w"]),
            ),
        ),
    )


def _poses_of(document: Any) -> list[PoseStamped]:
    if document is None:
        return []
    entries = _mapping(document, "document").get("trajectory")
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise TypeError("'trajectory' must be a sequence")
    return [pose_from_dict(entry) for entry in entries]


def load_from_json(file_path: PathLike) -> list[PoseStamped]:
    """Read a trajectory written as JSON."""
    with open(file_path, encoding="utf-8") as handle:
        return _poses_of(json.load(handle))


def _pose_from_csv_line(line: str) -> PoseStamped:
    fields = line.split(",", 7)
    if len(fields) < 8:
        raise ValueError(f"expected 8 fields in CSV line: {line!r}")
    frame_id, *numbers = fields
    x, y, z, qx, qy, qz, qw = (float(item) for item in numbers)
    return PoseStamped(
        header=Header(frame_id=frame_id),
        pose=Pose(
            position=Point(x=x, y=y, z=z),
            orientation=Quaternion(x=qx, y=qy, z=qz, w=qw),
        ),
    )


def load_from_csv(file_path: PathLike) -> list[PoseStamped]:
    """Read a trajectory written as CSV; the first line is a header."""
    with open(file_path, encoding="utf-8", newline="") as handle:
        next(handle, None)
        return [_pose_from_csv_line(line.rstrip("\r\n")) for line in handle]


def load_from_yaml(file_path: PathLike) -> list[PoseStamped]:
    """Read a trajectory written as YAML."""
    with open(file_path, encoding="utf-8") as handle:
        return _poses_of(yaml.safe_load(handle))


_LOADERS: dict[str, Callable[[PathLike], list[PoseStamped]]] = {
    "json": load_from_json,
    "csv": load_from_csv,
    "yaml": load_from_yaml,
}


def load_trajectory(file_path: PathLike, fmt: str) -> list[PoseStamped]:
    """Read a trajectory in the named format: 'json', 'csv' or 'yaml'."""
    try:
        loader = _LOADERS[fmt]
    except KeyError:
        raise UnsupportedFormatError(f"unsupported format: {fmt!r}") from None
    return loader(file_path)


class TrajectoryReader:
    """Loads saved trajectories on request and publishes them as a green line."""

    def __init__(
        self,
        publish: Optional[Callable[[MarkerArray], None]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._publish = publish
        self._clock = clock

    def load_trajectory(self, file_path: PathLike, fmt: str) -> ServiceResponse:
        """Load a trajectory file, publish it, and report the outcome."""
        try:
            trajectory = load_trajectory(file_path, fmt)
        except UnsupportedFormatError:
            return ServiceResponse(False, "Unsupported format or failed to parse file")
        except (OSError, ValueError, KeyError, TypeError, yaml.YAMLError) as exc:
            return ServiceResponse(False, f"Error: {exc}")
        self.publish_trajectory(trajectory)
        return ServiceResponse(True, "Trajectory loaded and published successfully")

    def publish_trajectory(self, trajectory: list[PoseStamped]) -> MarkerArray:
        """Publish a trajectory as a single line-strip marker and return it."""
        header = Header(frame_id=LOADED_FRAME, stamp=self._clock())
        marker = line_strip_marker(trajectory, header, LOADED_NAMESPACE, LOADED_COLOR)
        markers = MarkerArray(markers=[marker])
        if self._publish is not None:
            self._publish(markers)
        return markers