"""A kinematic stand-in for a TurtleBot3 base that integrates velocity commands."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

from tb3sim.messages import (
    Header,
    JointState,
    Odometry,
    Pose,
    TransformStamped,
    Twist,
    Vector3,
    quaternion_from_yaw,
)

WHEEL_RADIUS = 0.033  # m
MAX_LINEAR_VELOCITY = 0.22  # m/s
MAX_ANGULAR_VELOCITY = 2.84  # rad/s
CMD_VEL_TIMEOUT = 1.0  # s
LOOP_RATE = 30.0  # Hz

POSE_COVARIANCE = (
    0.1, 0.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.1, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 1e6, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1e6, 0.0, 0.0,
    0.0, 0.0, 0.0, 0.0, 1e6, 0.0,
    0.0, 0.0, 0.0, 0.0, 0.0, 0.2,
)


@dataclass(frozen=True)
class RobotGeometry:
    """Dimensions of a robot model, in metres."""

    wheel_separation: float
    turning_radius: float
    robot_radius: float


_WAFFLE = RobotGeometry(0.287, 0.1435, 0.220)
_GEOMETRIES = {
    "burger": RobotGeometry(0.160, 0.080, 0.105),
    "waffle": _WAFFLE,
    "waffle_pi": _WAFFLE,
}


def geometry_for_model(model: str) -> RobotGeometry:
    """Return the geometry of a TurtleBot3 model name."""
    try:
        return _GEOMETRIES[model]
    except KeyError:
        raise ValueError(f"unknown TurtleBot3 model: {model!r}") from None


@dataclass
class UpdateResult:
    """Messages produced by one update step."""

    odometry: Odometry
    joint_state: JointState
    transform: TransformStamped


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields nan or inf instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Turtlebot3Fake:
    """Dead-reckoning model of a differential-drive robot.

    Times are seconds on any monotonic clock supplied by the caller.
    """

    def __init__(
        self,
        model,
        now=0.0,
        left_joint_name="wheel_left_joint",
        right_joint_name="wheel_right_joint",
        joint_states_frame="base_footprint",
        odom_frame="odom",
        base_frame="base_footprint",
    ):
        self.geometry = geometry_for_model(model)
        self.joint_names = (left_joint_name, right_joint_name)
        self.joint_states_frame = joint_states_frame
        self.odom_frame = odom_frame
        self.base_frame = base_frame
        self.cmd_vel_timeout = CMD_VEL_TIMEOUT

        self.goal_linear_velocity = 0.0
        self.goal_angular_velocity = 0.0
        self.wheel_speed_cmd = (0.0, 0.0)
        self.wheel_positions = (0.0, 0.0)
        self.wheel_velocities = (0.0, 0.0)

        self.x = 0.0
        self.y = 0.0
        self.theta = 0.0
        self.linear_velocity = 0.0
        self.angular_velocity = 0.0

        self.last_cmd_vel_time = 0.0
        self.prev_update_time = now

    def command_velocity(self, twist: Twist, now: float) -> None:
        """Accept a velocity command received at time ``now``."""
        self.last_cmd_vel_time = now
        self.goal_linear_velocity = twist.linear.x
        self.goal_angular_velocity = twist.angular.z
        half = self.goal_angular_velocity * self.geometry.wheel_separation / 2
        self.wheel_speed_cmd = (
            self.goal_linear_velocity - half,
            self.goal_linear_velocity + half,
        )

    def _update_odometry(self, step: float) -> None:
        w_left, w_right = (v / WHEEL_RADIUS for v in self.wheel_speed_cmd)
        self.wheel_velocities = (w_left, w_right)

        wheel_l = w_left * step
        wheel_r = w_right * step
        if math.isnan(wheel_l):
            wheel_l = 0.0
        if math.isnan(wheel_r):
            wheel_r = 0.0

        left, right = self.wheel_positions
        self.wheel_positions = (left + wheel_l, right + wheel_r)

        delta_s = WHEEL_RADIUS * (wheel_r + wheel_l) / 2.0
        delta_theta = WHEEL_RADIUS * (wheel_r - wheel_l) / self.geometry.wheel_separation

        heading = self.theta + delta_theta / 2.0
        self.x += delta_s * math.cos(heading)
        self.y += delta_s * math.sin(heading)
        self.theta += delta_theta

        self.linear_velocity = _divide(delta_s, step)
        self.angular_velocity = _divide(delta_theta, step)

    def update(self, now: float) -> UpdateResult:
        """Advance the model to time ``now`` and return the messages to publish."""
        step = now - self.prev_update_time
        self.prev_update_time = now

        if now - self.last_cmd_vel_time > self.cmd_vel_timeout:
            self.wheel_speed_cmd = (0.0, 0.0)

        self._update_odometry(step)

        orientation = quaternion_from_yaw(self.theta)
        odometry = Odometry(
            header=Header(self.odom_frame, now),
            child_frame_id=self.base_frame,
            pose=Pose(Vector3(self.x, self.y, 0.0), orientation),
            pose_covariance=list(POSE_COVARIANCE),
            twist=Twist(
                Vector3(self.linear_velocity, 0.0, 0.0),
                Vector3(0.0, 0.0, self.angular_velocity),
            ),
            twist_covariance=list(POSE_COVARIANCE),
        )
        joint_state = JointState(
            header=Header(self.joint_states_frame, now),
            name=list(self.joint_names),
            position=list(self.wheel_positions),
            velocity=list(self.wheel_velocities),
            effort=[0.0, 0.0],
        )
        transform = TransformStamped(
            header=Header(self.odom_frame, now),
            child_frame_id=self.base_frame,
            translation=Vector3(self.x, self.y, 0.0),
            rotation=quaternion_from_yaw(self.theta),
        )
        return UpdateResult(odometry, joint_state, transform)


def main(argv=None) -> int:
    """Drive the model with a constant command in simulated time and print the pose."""
    parser = argparse.ArgumentParser(
        prog="tb3sim-fake",
        description="Integrate a constant velocity command on a simulated TurtleBot3.",
    )
    parser.add_argument("--model", default="burger", choices=sorted(_GEOMETRIES))
    parser.add_argument("--linear", type=float, default=0.0, help="linear velocity, m/s")
    parser.add_argument("--angular", type=float, default=0.0, help="angular velocity, rad/s")
    parser.add_argument("--duration", type=float, default=1.0, help="simulated seconds")
    parser.add_argument("--rate", type=float, default=LOOP_RATE, help="update rate, Hz")
    parser.add_argument("--verbose", action="store_true", help="print every step")
    args = parser.parse_args(argv)
    if args.rate <= 0:
        parser.error("--rate must be positive")
    if args.duration < 0:
        parser.error("--duration must not be negative")

    robot = Turtlebot3Fake(args.model, now=0.0)
    command = Twist(Vector3(args.linear, 0.0, 0.0), Vector3(0.0, 0.0, args.angular))
    steps = round(args.duration * args.rate)
    period = 1.0 / args.rate
    for index in range(1, steps + 1):
        robot.command_velocity(command, (index - 1) * period)
        robot.update(index * period)
        if args.verbose:
            print(f"t={index * period:.6f} x={robot.x:.6f} y={robot.y:.6f} yaw={robot.theta:.6f}")
    print(f"x={robot.x:.6f} y={robot.y:.6f} yaw={robot.theta:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())