# tb3sim

A small, dependency-free simulation of a TurtleBot3 differential-drive robot.

The package has three modules:

- **`tb3sim.messages`** — plain dataclass message types: `Vector3`,
  `Quaternion`, `Twist`, `Header`, `Pose`, `Odometry`, `JointState`,
  `LaserScan` and `TransformStamped`, plus `quaternion_from_yaw(yaw)` and
  `yaw_from_quaternion(q)`.
- **`tb3sim.fake`** — a kinematic "fake" robot. Give it velocity commands
  (`Twist`) and call `update(now)`; it integrates wheel motion into
  odometry, joint states and an odometry transform. If no command has
  arrived for more than one second, the wheel commands are zeroed and the
  robot stops. Wheel geometry is chosen by model name (`burger`, `waffle`,
  `waffle_pi`); any other name raises `ValueError`.
- **`tb3sim.drive`** — a simple reactive controller. It reads laser ranges
  straight ahead (index 0), 30° left (index 30) and 30° right (index 330),
  with infinite readings replaced by `range_max`, and the robot's heading
  from odometry. It steers with a four-state machine (`DriveState`):
  look, drive forward, turn right, turn left. A turn ends once the heading
  has changed by at least 30°.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the fake robot

Times are plain seconds on whatever clock you supply.

```python
from tb3sim.fake import Turtlebot3Fake
from tb3sim.messages import Twist, Vector3

robot = Turtlebot3Fake("burger", now=0.0)
robot.command_velocity(Twist(linear=Vector3(x=0.1), angular=Vector3(z=0.0)), now=0.0)
result = robot.update(now=0.5)

print(result.odometry.pose.position.x)   # distance travelled along x
print(result.joint_state.position)       # wheel angles in radians
print(result.transform.translation)      # odom -> base_footprint transform
```

`update` returns an `UpdateResult` with `odometry`, `joint_state` and
`transform`. The robot's state is also available as attributes such as
`x`, `y`, `theta`, `linear_velocity`, `angular_velocity`,
`wheel_positions` and `wheel_velocities`. Joint names and frame names can
be set through the constructor (`left_joint_name`, `right_joint_name`,
`joint_states_frame`, `odom_frame`, `base_frame`).

`geometry_for_model(model)` returns the `RobotGeometry` (wheel separation,
turning radius, robot radius) for a model name.

## Using the drive controller

```python
from tb3sim.drive import Turtlebot3Drive

driver = Turtlebot3Drive()
driver.on_laser_scan(scan)          # a tb3sim.messages.LaserScan
driver.on_odometry(odom)            # a tb3sim.messages.Odometry
command = driver.control_loop()     # one step; a Twist to send, or None
halt = driver.stop()                # a zero-velocity Twist
```

## Commands

```
tb3sim-fake --model burger --linear 0.1 --angular 0.5 --duration 2 --rate 30
```

Steps the fake robot through `--duration` simulated seconds at `--rate`
updates per second (default 30) with a constant command, then prints the
final `x`, `y` and `yaw`. `--verbose` prints the pose after every step.
It runs as fast as it can; it does not wait in real time.

```
tb3sim-drive < sensors.jsonl
```

Reads one JSON object per line from standard input. A line may hold
`"ranges"` (a list, `null` meaning no return) with `"range_max"`, and/or
`"orientation"` as `[x, y, z, w]` or `"yaw"` in radians. After each line the
control loop runs once and any command is printed as `linear angular`. A
final stop command `0 0` is printed at the end. A malformed line prints an
error to standard error, prints the stop command and exits with status 1.

## What this package does not do

There is no messaging middleware: nothing is published or subscribed, and
messages are only returned from method calls or printed by the commands.
There is no physics or sensor simulation, so laser scans and odometry for
the drive controller must come from you, and neither command runs as a
live, real-time node.