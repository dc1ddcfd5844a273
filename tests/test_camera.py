import pytest

from axion.camera import (
    Camera,
    CameraControllerMode,
    CameraControllerState,
    CameraSettings,
    MouseInput,
    handle_camera,
)


def test_default_settings_match_editor_defaults():
    settings = CameraSettings()
    assert settings.orthographic_viewport_height == 1000.0
    assert settings.zoom_range == (0.1, 10.0)
    assert settings.pan_speed == 70.0
    assert settings.zoom_speed == 2.0


def test_inverted_zoom_range_is_rejected():
    with pytest.raises(ValueError):
        CameraSettings(zoom_range=(5.0, 1.0))


def test_camera_from_settings_uses_viewport_height():
    settings = CameraSettings(orthographic_viewport_height=640.0)
    camera = Camera.from_settings(settings)
    assert camera.viewport_height == 640.0
    assert (camera.x, camera.y, camera.scale) == (0.0, 0.0, 1.0)
    assert camera.visible_height == 640.0


def test_default_mode_is_general():
    assert CameraControllerState().mode is CameraControllerMode.GENERAL


def test_pan_requires_middle_button():
    camera = Camera()
    handle_camera(camera, CameraControllerState(), CameraSettings(), MouseInput(delta=(3.0, 4.0)), 0.1)
    assert (camera.x, camera.y) == (0.0, 0.0)


def test_pan_moves_against_x_and_with_y():
    camera = Camera()
    mouse = MouseInput(delta=(3.0, 4.0), middle_pressed=True)
    handle_camera(camera, CameraControllerState(), CameraSettings(), mouse, 0.1)
    assert camera.x < 0.0
    assert camera.y > 0.0


def test_pan_distance_scales_with_frame_time():
    short, long = Camera(), Camera()
    mouse = MouseInput(delta=(2.0, -1.0), middle_pressed=True)
    handle_camera(short, CameraControllerState(), CameraSettings(), mouse, 0.05)
    handle_camera(long, CameraControllerState(), CameraSettings(), mouse, 0.1)
    assert long.x == pytest.approx(2 * short.x)
    assert long.y == pytest.approx(2 * short.y)


def test_scroll_up_zooms_in_and_down_zooms_out():
    settings = CameraSettings()
    zoom_in, zoom_out = Camera(), Camera()
    handle_camera(zoom_in, CameraControllerState(), settings, MouseInput(scroll=(1.0,)), 0.1)
    handle_camera(zoom_out, CameraControllerState(), settings, MouseInput(scroll=(-1.0,)), 0.1)
    assert zoom_in.scale < 1.0 < zoom_out.scale


def test_zoom_is_clamped_to_range():
    settings = CameraSettings()
    camera = Camera()
    handle_camera(camera, CameraControllerState(), settings, MouseInput(scroll=(-100.0,) * 10), 1.0)
    assert camera.scale == settings.zoom_range[1]
    handle_camera(camera, CameraControllerState(), settings, MouseInput(scroll=(0.49,) * 50), 1.0)
    assert camera.scale == settings.zoom_range[0]


@pytest.mark.parametrize("mode", [CameraControllerMode.PICKER, CameraControllerMode.PAN])
def test_other_modes_leave_camera_alone(mode):
    camera = Camera()
    mouse = MouseInput(delta=(5.0, 5.0), middle_pressed=True, left_pressed=True, scroll=(1.0,))
    selected = handle_camera(camera, CameraControllerState(mode), CameraSettings(), mouse, 0.1)
    assert selected is False
    assert (camera.x, camera.y, camera.scale) == (0.0, 0.0, 1.0)


def test_left_button_requests_selection_in_general_mode():
    camera = Camera()
    assert handle_camera(camera, CameraControllerState(), CameraSettings(), MouseInput(left_pressed=True), 0.1) is True
    assert handle_camera(camera, CameraControllerState(), CameraSettings(), MouseInput(), 0.1) is False