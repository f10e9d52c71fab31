"""Reactive obstacle-avoiding driver for a TurtleBot3 in simulation."""

from __future__ import annotations

import argparse
import json
import math
import sys
from enum import IntEnum

from tb3sim.messages import (
    LaserScan,
    Odometry,
    Pose,
    Quaternion,
    Twist,
    Vector3,
    quaternion_from_yaw,
    yaw_from_quaternion,
)

LINEAR_VELOCITY = 0.3  # m/s
ANGULAR_VELOCITY = 1.5  # rad/s
ESCAPE_RANGE = math.radians(30.0)
CHECK_FORWARD_DIST = 0.7  # m
CHECK_SIDE_DIST = 0.6  # m
LOOP_RATE = 125.0  # Hz

# Scan indices, in degrees, for the centre, left and right readings.
SCAN_ANGLES = (0, 30, 330)


class DriveState(IntEnum):
    """Step of the driving state machine."""

    GET_DIRECTION = 0
    DRIVE_FORWARD = 1
    RIGHT_TURN = 2
    LEFT_TURN = 3


class Turtlebot3Drive:
    """Drives forward and turns away from obstacles seen by the laser."""

    def __init__(self):
        self.escape_range = ESCAPE_RANGE
        self.check_forward_dist = CHECK_FORWARD_DIST
        self.check_side_dist = CHECK_SIDE_DIST
        self.center = 0.0
        self.left = 0.0
        self.right = 0.0
        self.tb3_pose = 0.0
        self.prev_tb3_pose = 0.0
        self.state = DriveState.GET_DIRECTION

    def on_odometry(self, odom: Odometry) -> None:
        """Record the robot's heading from an odometry message."""
        self.tb3_pose = yaw_from_quaternion(odom.pose.orientation)

    def on_laser_scan(self, scan: LaserScan) -> None:
        """Record the centre, left and right ranges; infinite readings become range_max."""
        self.center, self.left, self.right = (
            scan.range_max if math.isinf(scan.ranges[angle]) else scan.ranges[angle]
            for angle in SCAN_ANGLES
        )

    def _start_turn(self, state: DriveState) -> None:
        self.prev_tb3_pose = self.tb3_pose
        self.state = state

    def _turned_enough(self) -> bool:
        return abs(self.prev_tb3_pose - self.tb3_pose) >= self.escape_range

    def control_loop(self) -> Twist | None:
        """Run one step; return the velocity command to publish, if any."""
        state = self.state
        if state is DriveState.GET_DIRECTION:
            if self.center > self.check_forward_dist:
                if self.left < self.check_side_dist:
                    self._start_turn(DriveState.RIGHT_TURN)
                elif self.right < self.check_side_dist:
                    self._start_turn(DriveState.LEFT_TURN)
                else:
                    self.state = DriveState.DRIVE_FORWARD
            elif self.center < self.check_forward_dist:
                self._start_turn(DriveState.RIGHT_TURN)
            return None

        if state is DriveState.DRIVE_FORWARD:
            self.state = DriveState.GET_DIRECTION
            return Twist(Vector3(LINEAR_VELOCITY, 0.0, 0.0), Vector3())

        if self._turned_enough():
            self.state = DriveState.GET_DIRECTION
            return None
        sign = -1.0 if state is DriveState.RIGHT_TURN else 1.0
        return Twist(Vector3(), Vector3(0.0, 0.0, sign * ANGULAR_VELOCITY))

    def stop(self) -> Twist:
        """Return the command that halts the robot."""
        return Twist()


def _parse_ranges(values) -> list[float]:
    return [math.inf if value is None else float(value) for value in values]


def _handle(driver: Turtlebot3Drive, record: dict) -> None:
    if "ranges" in record:
        driver.on_laser_scan(
            LaserScan(
                ranges=_parse_ranges(record["ranges"]),
                range_min=float(record.get("range_min", 0.0)),
                range_max=float(record.get("range_max", 0.0)),
            )
        )
    if "orientation" in record:
        x, y, z, w = (float(value) for value in record["orientation"])
        driver.on_odometry(Odometry(pose=Pose(orientation=Quaternion(x, y, z, w))))
    elif "yaw" in record:
        driver.on_odometry(Odometry(pose=Pose(orientation=quaternion_from_yaw(float(record["yaw"])))))


def _format(twist: Twist) -> str:
    return f"{twist.linear.x:g} {twist.angular.z:g}"


def main(argv=None) -> int:
    """Read sensor records as JSON lines from stdin and print velocity commands.

    Each line is an object with "ranges" (null for no return) and "range_max",
    and/or "orientation" [x, y, z, w] or "yaw". After every line the control
    loop runs once; a published command is printed as "linear angular".
    """
    parser = argparse.ArgumentParser(
        prog="tb3sim-drive",
        description="Obstacle-avoiding driver reading JSON sensor lines from stdin.",
    )
    parser.parse_args(argv)

    driver = Turtlebot3Drive()
    for number, line in enumerate(sys.stdin, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
            if not isinstance(record, dict):
                raise ValueError("expected a JSON object")
            _handle(driver, record)
        except (ValueError, TypeError, IndexError) as exc:
            print(f"line {number}: {exc}", file=sys.stderr)
            print(_format(driver.stop()))
            return 1
        command = driver.control_loop()
        if command is not None:
            print(_format(command))
    print(_format(driver.stop()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())