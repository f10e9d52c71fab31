"""Plain message types exchanged by the simulated robot nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """A rotation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Twist:
    """Linear and angular velocity."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


@dataclass
class Header:
    """Frame and time stamp (seconds) of a message."""

    frame_id: str = ""
    stamp: float = 0.0


@dataclass
class Pose:
    """Position and orientation."""

    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)


def _zero_covariance() -> list[float]:
    return [0.0] * 36


@dataclass
class Odometry:
    """Estimated pose and velocity of a robot, with 6x6 row-major covariances."""

    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    pose: Pose = field(default_factory=Pose)
    pose_covariance: list[float] = field(default_factory=_zero_covariance)
    twist: Twist = field(default_factory=Twist)
    twist_covariance: list[float] = field(default_factory=_zero_covariance)


@dataclass
class JointState:
    """Names, positions, velocities and efforts of a set of joints."""

    header: Header = field(default_factory=Header)
    name: list[str] = field(default_factory=list)
    position: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)
    effort: list[float] = field(default_factory=list)


@dataclass
class LaserScan:
    """One sweep of a range finder; ``ranges`` holds one reading per degree."""

    ranges: list[float] = field(default_factory=list)
    range_min: float = 0.0
    range_max: float = 0.0


@dataclass
class TransformStamped:
    """A transform from ``header.frame_id`` to ``child_frame_id``."""

    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)


def quaternion_from_yaw(yaw: float) -> Quaternion:
    """Return the quaternion for a rotation of ``yaw`` radians about z."""
    half = yaw / 2.0
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


def yaw_from_quaternion(q: Quaternion) -> float:
    """Return the rotation about z, in radians, of quaternion ``q``."""
    siny = 2.0 * (q.w * q.z + q.x * q.y)
    cosy = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return math.atan2(siny, cosy)