"""Writing trajectories to JSON, CSV and YAML files."""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Iterable, Union

import yaml

from trajtools.models import PoseStamped

PathLike = Union[str, "os.PathLike[str]"]

CSV_HEADER = "frame_id,x,y,z,qx,qy,qz,qw"


class TrajectorySaveError(Exception):
    """Raised when a trajectory cannot be written."""


def pose_to_dict(pose: PoseStamped) -> dict[str, Any]:
    """Return the nested mapping under which a pose is stored."""
    position = pose.pose.position
    orientation = pose.pose.orientation
    return {
        "header": {"frame_id": pose.header.frame_id},
        "pose": {
            "position": {
                "x": float(position.x),
                "y": float(position.y),
                "z": float(position.z),
            },
            "orientation": {
                "x": float(orientation.x),
                "y": float(orientation.y),
                "z": float(orientation.z),
                "w": float(orientation.w),
            },
        },
    }


def _write(file_path: PathLike, text: str) -> None:
    try:
        with open(file_path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except OSError as exc:
        raise TrajectorySaveError(f"cannot write {os.fspath(file_path)!s}: {exc}") from exc


def save_to_json(trajectory: Iterable[PoseStamped], file_path: PathLike) -> None:
    """Write a trajectory as JSON; an empty trajectory is written as null."""
    poses = [pose_to_dict(pose) for pose in trajectory]
    document = {"trajectory": poses} if poses else None
    _write(file_path, json.dumps(document, indent=4, sort_keys=True))


def save_to_csv(trajectory: Iterable[PoseStamped], file_path: PathLike) -> None:
    """Write a trajectory as CSV, one pose per line after a header line."""
    lines = [CSV_HEADER]
    for pose in trajectory:
        p = pose.pose.position
        q = pose.pose.orientation
        values = (p.x, p.y, p.z, q.x, q.y, q.z, q.w)
        lines.append(",".join([pose.header.frame_id, *(f"{v:g}" for v in values)]))
    _write(file_path, "\n".join(lines) + "\n")


def save_to_yaml(trajectory: Iterable[PoseStamped], file_path: PathLike) -> None:
    """Write a trajectory as a YAML document with a 'trajectory' sequence."""
    document = {"trajectory": [pose_to_dict(pose) for pose in trajectory]}
    try:
        text = yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    except yaml.YAMLError as exc:
        raise TrajectorySaveError(f"cannot encode trajectory: {exc}") from exc
    _write(file_path, text)


_SAVERS: dict[str, Callable[[Iterable[PoseStamped], PathLike], None]] = {
    "json": save_to_json,
    "csv": save_to_csv,
    "yaml": save_to_yaml,
}


def save_trajectory(
    trajectory: Iterable[PoseStamped], file_path: PathLike, fmt: str
) -> None:
    """Write a trajectory in the named format: 'json', 'csv' or 'yaml'."""
    try:
        saver = _SAVERS[fmt]
    except KeyError:
        raise TrajectorySaveError(f"unsupported format: {fmt!r}") from None
    saver(trajectory, file_path)