# trajtools

trajtools is a library for robot trajectories. It can:

- record the poses that arrive in odometry messages;
- save a trajectory as JSON, CSV or YAML;
- read a saved trajectory back;
- turn a trajectory into a line-strip marker that a visualiser can draw.

## Modules

### `trajtools.models`

This module holds plain dataclasses for the messages involved: `Point`,
`Quaternion`, `Pose`, `Header`, `PoseStamped`, `Odometry`, `Color`, `Marker`,
`MarkerArray` and `ServiceResponse`.

- A `Header` holds a `frame_id` and a `stamp` in seconds.
- A `Quaternion` defaults to the identity rotation.

`line_strip_marker(trajectory, header, namespace, color)` builds a
`Marker.LINE_STRIP` marker. The marker has id 0, a line width (`scale.x`) of
0.02, and one point for each pose position in the trajectory.

### `trajtools.saver`

`save_to_json`, `save_to_csv` and `save_to_yaml` each write a trajectory to a
file. `save_trajectory(trajectory, file_path, fmt)` chooses the writer by
format name: `"json"`, `"csv"` or `"yaml"`.

`TrajectorySaveError` is raised in two cases:

- the format name is not one of the three;
- the file cannot be written.

`pose_to_dict(pose)` returns the nested mapping that is stored for each pose.

### `trajtools.reader`

`load_from_json`, `load_from_csv` and `load_from_yaml` read a file back into a
list of `PoseStamped`. `load_trajectory(file_path, fmt)` chooses the reader by
format name.

Errors:

- For any other format name it raises `UnsupportedFormatError`, which is a
  subclass of `ValueError`.
- Missing files, malformed documents, missing fields and non-numeric values
  raise the usual `OSError`, `ValueError`, `KeyError`, `TypeError` or
  `yaml.YAMLError`.

`pose_from_dict(data)` builds a `PoseStamped` from the nested mapping.

`TrajectoryReader` loads saved files and republishes them.

- `load_trajectory(file_path, fmt)` loads a file and publishes it. It returns
  a `ServiceResponse`; it does not raise.
  - On success the message is `"Trajectory loaded and published successfully"`.
  - For an unknown format the message is
    `"Unsupported format or failed to parse file"`.
  - For any other failure the message is `"Error: "` followed by the cause.
- `publish_trajectory(trajectory)` publishes a green line strip in the `odom`
  frame, in namespace `loaded_trajectory`. The marker is stamped with the
  clock's current time. It returns the `MarkerArray` it published.

### `trajtools.publisher`

`TrajectoryPublisher` records a trajectory from odometry.

- `odom_callback(msg)` appends the pose of an `Odometry` message to the
  trajectory. It then publishes a red line strip of the whole path, under the
  message's header and in namespace `trajectory`, and returns that
  `MarkerArray`.
- `poses_since(duration)` returns the poses stamped at or after
  `now - duration`. If `duration` is not positive, it returns every pose.
- `save_trajectory(file_path, fmt, duration=0.0)` writes those poses in the
  named format. It returns a `ServiceResponse`:
  - on success, the message is `"Trajectory saved successfully"`;
  - otherwise, the message is `"Failed to save trajectory"`.

`TrajectoryPublisher` and `TrajectoryReader` take the same two optional
arguments:

- `publish`: a callable that receives each `MarkerArray`. If it is omitted,
  nothing is sent, but the marker array is still returned.
- `clock`: a callable that returns the current time in seconds. The default
  is `time.time`.

## File formats

Every format stores the same fields for each pose:

- the frame id;
- the position: `x`, `y`, `z`;
- the orientation quaternion: `x`, `y`, `z`, `w`.

Timestamps are not stored. A loaded pose has a stamp of 0.

### YAML

A YAML file holds a top-level `trajectory` sequence:

```yaml
trajectory:
- header:
    frame_id: odom
  pose:
    position:
      x: 1.0
      y: 2.0
      z: 0.0
    orientation:
      x: 0.0
      y: 0.0
      z: 0.0
      w: 1.0
```

### JSON

JSON files have the same structure, indented by four spaces, with keys sorted.
An empty trajectory is written as `null`. When loading, `null` or a missing
`trajectory` key gives an empty list.

### CSV

A CSV file starts with a header row, followed by one row per pose. Numbers are
written in short `%g` form:

```
frame_id,x,y,z,qx,qy,qz,qw
odom,1,2,0,0,0,0,1
```

The reader skips the first line. It splits each row at its first seven commas.

## Example

```python
from trajtools.models import Header, Odometry, Point, Pose
from trajtools.publisher import TrajectoryPublisher
from trajtools.reader import TrajectoryReader, load_trajectory
from trajtools.saver import save_trajectory

recorder = TrajectoryPublisher(publish=print)
recorder.odom_callback(
    Odometry(header=Header(frame_id="odom", stamp=0.0),
             pose=Pose(position=Point(1.0, 2.0, 0.0)))
)
print(recorder.save_trajectory("run.csv", "csv"))

poses = load_trajectory("run.csv", "csv")
save_trajectory(poses, "run.yaml", "yaml")

print(TrajectoryReader().load_trajectory("run.yaml", "yaml"))
```

## What it does not do

trajtools does not connect to a robot or to a messaging system:

- it does not subscribe to odometry topics;
- it does not serve save or load requests;
- it does not send markers anywhere by itself.

The caller passes in `Odometry` messages, calls the save and load methods, and
supplies the `publish` callable that delivers markers.

There is no command-line tool.