import pytest

from trajtools.models import Header, Marker, Odometry, Point, Pose, Quaternion
from trajtools.publisher import TrajectoryPublisher
from trajtools.reader import load_trajectory


def _odom(stamp, x, y, frame="odom"):
    return Odometry(
        header=Header(frame_id=frame, stamp=stamp),
        child_frame_id="base_link",
        pose=Pose(Point(x, y, 0.0), Quaternion(0.0, 0.0, 0.0, 1.0)),
    )


def _filled(clock_value=10.0):
    published = []
    node = TrajectoryPublisher(publish=published.append, clock=lambda: clock_value)
    for stamp, x in ((1.0, 0.5), (2.0, 1.5), (3.0, 2.5)):
        node.odom_callback(_odom(stamp, x, -x))
    return node, published


def test_odom_callback_publishes_growing_line():
    node, published = _filled()
    assert len(published) == 3
    assert [len(m.markers[0].points) for m in published] == [1, 2, 3]
    marker = published[-1].markers[0]
    assert marker.ns == "trajectory"
    assert marker.type == Marker.LINE_STRIP
    assert marker.header.stamp == 3.0
    assert (marker.color.r, marker.color.g, marker.color.b, marker.color.a) == (1.0, 0.0, 0.0, 1.0)
    assert marker.points == [Point(0.5, -0.5, 0.0), Point(1.5, -1.5, 0.0), Point(2.5, -2.5, 0.0)]


def test_recorded_poses_keep_headers():
    node, _ = _filled()
    poses = node.poses_since(0)
    assert [p.header.stamp for p in poses] == [1.0, 2.0, 3.0]
    assert all(p.header.frame_id == "odom" for p in poses)


@pytest.mark.parametrize("duration", [0, -5.0])
def test_poses_since_non_positive_returns_all(duration):
    node, _ = _filled()
    assert len(node.poses_since(duration)) == 3


def test_poses_since_filters_by_cutoff():
    node, _ = _filled(clock_value=10.0)
    assert [p.header.stamp for p in node.poses_since(8.5)] == [2.0, 3.0]
    assert [p.header.stamp for p in node.poses_since(8.0)] == [2.0, 3.0]
    assert node.poses_since(1.0) == []


@pytest.mark.parametrize("fmt", ["json", "csv", "yaml"])
def test_save_trajectory_round_trip(tmp_path, fmt):
    node, _ = _filled()
    path = tmp_path / f"t.{fmt}"
    response = node.save_trajectory(path, fmt)
    assert response.success is True
    assert response.message == "Trajectory saved successfully"
    loaded = load_trajectory(path, fmt)
    assert [p.pose for p in loaded] == [p.pose for p in node.poses_since(0)]


def test_save_trajectory_with_duration(tmp_path):
    node, _ = _filled(clock_value=10.0)
    path = tmp_path / "t.csv"
    assert node.save_trajectory(path, "csv", 7.5).success is True
    loaded = load_trajectory(path, "csv")
    assert [p.pose for p in loaded] == [p.pose for p in node.poses_since(7.5)]
    assert len(loaded) == 1


def test_save_trajectory_unsupported_format(tmp_path):
    node, _ = _filled()
    response = node.save_trajectory(tmp_path / "t.xml", "xml")
    assert response.success is False
    assert response.message == "Failed to save trajectory"
    assert not (tmp_path / "t.xml").exists()


def test_save_trajectory_unwritable_path(tmp_path):
    node, _ = _filled()
    response = node.save_trajectory(tmp_path / "missing" / "t.json", "json")
    assert response.success is False
    assert response.message == "Failed to save trajectory"