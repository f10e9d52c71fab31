import math

import pytest

from tb3sim.fake import (
    POSE_COVARIANCE,
    RobotGeometry,
    Turtlebot3Fake,
    geometry_for_model,
    main,
)
from tb3sim.messages import Twist, Vector3, yaw_from_quaternion


def twist(linear=0.0, angular=0.0):
    return Twist(Vector3(linear, 0.0, 0.0), Vector3(0.0, 0.0, angular))


def test_burger_geometry():
    assert geometry_for_model("burger") == RobotGeometry(0.160, 0.080, 0.105)


def test_waffle_models_share_geometry():
    assert geometry_for_model("waffle") == geometry_for_model("waffle_pi")
    assert geometry_for_model("waffle").wheel_separation == 0.287


@pytest.mark.parametrize("model", ["", "rover", "Burger"])
def test_unknown_model_rejected(model):
    with pytest.raises(ValueError):
        geometry_for_model(model)
    with pytest.raises(ValueError):
        Turtlebot3Fake(model)


def test_default_frames_and_joint_names():
    result = Turtlebot3Fake("burger", now=0.0).update(0.1)
    assert result.odometry.header.frame_id == "odom"
    assert result.odometry.child_frame_id == "base_footprint"
    assert result.joint_state.header.frame_id == "base_footprint"
    assert result.joint_state.name == ["wheel_left_joint", "wheel_right_joint"]
    assert result.joint_state.effort == [0.0, 0.0]


def test_custom_frames():
    robot = Turtlebot3Fake("waffle", 0.0, "l", "r", "js", "world", "base")
    result = robot.update(0.1)
    assert result.joint_state.name == ["l", "r"]
    assert result.joint_state.header.frame_id == "js"
    assert result.transform.header.frame_id == "world"
    assert result.transform.child_frame_id == "base"


def test_covariance_matches_table():
    odom = Turtlebot3Fake("burger").update(0.1).odometry
    assert odom.pose_covariance == list(POSE_COVARIANCE)
    assert odom.twist_covariance == list(POSE_COVARIANCE)
    assert odom.pose_covariance[0] == 0.1
    assert odom.pose_covariance[14] == 1e6
    assert odom.pose_covariance[35] == 0.2


def test_straight_drive():
    robot = Turtlebot3Fake("burger", now=0.0)
    robot.command_velocity(twist(linear=0.1), 0.0)
    odom = robot.update(0.5).odometry
    assert odom.pose.pose.position.x > 0.0 if False else odom.pose.position.x > 0.0
    assert odom.pose.position.y == pytest.approx(0.0)
    assert yaw_from_quaternion(odom.pose.orientation) == pytest.approx(0.0)
    assert odom.twist.linear.x == pytest.approx(0.1)
    assert odom.header.stamp == 0.5


def test_turn_in_place():
    robot = Turtlebot3Fake("burger", now=0.0)
    robot.command_velocity(twist(angular=1.0), 0.0)
    result = robot.update(0.5)
    odom = result.odometry
    assert odom.pose.position.x == pytest.approx(0.0)
    assert odom.pose.position.y == pytest.approx(0.0)
    assert odom.twist.angular.z == pytest.approx(1.0)
    assert yaw_from_quaternion(odom.pose.orientation) == pytest.approx(robot.theta)
    left, right = result.joint_state.position
    assert left == pytest.approx(-right)
    assert right > 0.0


def test_transform_follows_odometry():
    robot = Turtlebot3Fake("waffle_pi", now=0.0)
    robot.command_velocity(twist(linear=0.2, angular=0.5), 0.0)
    result = robot.update(0.3)
    assert result.transform.translation == result.odometry.pose.position
    assert result.transform.rotation == result.odometry.pose.orientation


def test_command_times_out():
    robot = Turtlebot3Fake("burger", now=0.0)
    robot.command_velocity(twist(linear=0.1), 0.0)
    first = robot.update(0.5).odometry.pose.position.x
    later = robot.update(2.0)
    assert later.odometry.pose.position.x == pytest.approx(first)
    assert later.joint_state.velocity == [0.0, 0.0]


def test_no_command_means_no_motion():
    robot = Turtlebot3Fake("burger", now=5.0)
    odom = robot.update(5.5).odometry
    assert (odom.pose.position.x, odom.pose.position.y) == (0.0, 0.0)


def test_zero_step_gives_nan_velocity():
    robot = Turtlebot3Fake("burger", now=1.0)
    odom = robot.update(1.0).odometry
    assert math.isnan(odom.twist.linear.x)
    assert math.isnan(odom.twist.angular.z)
    assert odom.pose.position.x == 0.0


def test_main_prints_final_pose(capsys):
    assert main(["--linear", "0.1", "--duration", "1"]) == 0
    fields = dict(part.split("=") for part in capsys.readouterr().out.split())
    assert float(fields["x"]) > 0.0
    assert float(fields["y"]) == pytest.approx(0.0)
    assert float(fields["yaw"]) == pytest.approx(0.0)


def test_main_rejects_bad_rate():
    with pytest.raises(SystemExit):
        main(["--rate", "0"])