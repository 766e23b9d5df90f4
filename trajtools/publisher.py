"""Recording odometry into a trajectory, drawing it and saving it on request."""

from __future__ import annotations

import os
import time
from collections import deque
from dataclasses import replace
from typing import Callable, Optional, Union

from trajtools.models import (
    Color,
    MarkerArray,
    Odometry,
    PoseStamped,
    ServiceResponse,
    line_strip_marker,
)
from trajtools.saver import TrajectorySaveError, save_trajectory

PathLike = Union[str, "os.PathLike[str]"]

TRAJECTORY_NAMESPACE = "trajectory"
TRAJECTORY_COLOR = Color(r=1.0, g=0.0, b=0.0, a=1.0)


class TrajectoryPublisher:
    """Accumulates odometry poses, publishes them as a red line and saves them."""

    def __init__(
        self,
        publish: Optional[Callable[[MarkerArray], None]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._publish = publish
        self._clock = clock
        self._trajectory: deque[PoseStamped] = deque()

    def odom_callback(self, msg: Odometry) -> MarkerArray:
        """Record the pose of an odometry message and publish the whole path."""
        self._trajectory.append(
            PoseStamped(header=replace(msg.header), pose=replace(msg.pose))
        )
        marker = line_strip_marker(
            self._trajectory, msg.header, TRAJECTORY_NAMESPACE, TRAJECTORY_COLOR
        )
        markers = MarkerArray(markers=[marker])
        if self._publish is not None:
            self._publish(markers)
        return markers

    def poses_since(self, duration: float) -> list[PoseStamped]:
        """Poses stamped within the last `duration` seconds; all if not positive."""
        if duration > 0:
            cutoff = self._clock() - duration
            return [pose for pose in self._trajectory if pose.header.stamp >= cutoff]
        return list(self._trajectory)

    def save_trajectory(
        self, file_path: PathLike, fmt: str, duration: float = 0.0
    ) -> ServiceResponse:
        """Save recent poses in the named format and report the outcome."""
        try:
            save_trajectory(self.poses_since(duration), file_path, fmt)
        except TrajectorySaveError:
            return ServiceResponse(False, "Failed to save trajectory")
        return ServiceResponse(True, "Trajectory saved successfully")