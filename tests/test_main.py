"""Tests for the command line entry point and shot prompt."""
import pytest
from unittest.mock import MagicMock, Mock, patch

from shot_assist.automation.shot_planner import ShotType
from shot_assist.automation.target_tracker import TimedOut
from shot_assist.capture.frame import Frame, Point
from shot_assist.config.game_config import GameConfig
from shot_assist.errors import CaptureError, InputError
from shot_assist.capture.x11_capture import X11FrameSource
from shot_assist.main import run_prompt, check_display, take_snapshot, main


def lines(*commands):
    """read_line replacement feeding commands, then end of input."""
    feed = iter(commands)

    def read_line(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return read_line


def make_source(info=(1920, 1080, 1.0), origin=(0, 0)):
    """Frame source mock for a display that passes or fails startup checks."""
    source = Mock()
    source.display_info.return_value = info
    source.monitor_origin.return_value = origin
    return source


class TestRunPrompt:
    """Tests for the single-letter command loop."""

    def test_dispatches_shot_commands(self):
        executor = Mock()
        executor.take_shot.return_value = TimedOut()

        run_prompt(executor, lines("c", " l ", "m", "a", "q", "c"))

        assert [c.args[0] for c in executor.take_shot.call_args_list] == [
            ShotType.CENTER, ShotType.LOB, ShotType.MANUAL, ShotType.AIMED,
        ]

    def test_invalid_input_reports_usage(self, capsys):
        executor = Mock()
        run_prompt(executor, lines("x", "q"))

        assert "Invalid input: 'x'" in capsys.readouterr().out
        executor.take_shot.assert_not_called()

    def test_shot_error_keeps_prompt_running(self, capsys):
        executor = Mock()
        executor.take_shot.side_effect = [CaptureError("lost"), TimedOut()]

        run_prompt(executor, lines("c", "l", "q"))

        assert executor.take_shot.call_count == 2
        assert "center shot failed: lost" in capsys.readouterr().out

    def test_end_of_input_exits(self):
        executor = Mock()
        run_prompt(executor, lines())
        executor.take_shot.assert_not_called()


class TestStartup:
    """Tests for display checks and snapshot mode."""

    def test_check_display_accepts_unscaled(self):
        check_display(make_source(), Point(550, 609))

    def test_check_display_rejects_scaling(self):
        source = make_source(info=(3840, 2160, 2.0))
        with pytest.raises(SystemExit):
            check_display(source, Point(550, 609))

    @patch('shot_assist.capture.x11_capture.Xlib.display.Display')
    def test_check_display_accepts_near_96_dpi(self, display_cls):
        """A 1920px wide, 531mm monitor is about 92 DPI and is not scaled."""
        display = MagicMock()
        display.has_extension.return_value = False
        screen = display.screen.return_value
        screen.width_in_pixels = 1920
        screen.height_in_pixels = 1080
        screen.width_in_mms = 531
        display_cls.return_value = display
        source = X11FrameSource()

        assert source.display_info() == (1920, 1080, 1.0)
        check_display(source, Point(550, 609))

    def test_check_display_rejects_secondary_monitor(self):
        source = make_source(origin=(1920, 0))
        with pytest.raises(SystemExit, match="Multi-monitor"):
            check_display(source, Point(2470, 609))
        source.monitor_origin.assert_called_once_with(2470, 609)

    def test_take_snapshot(self, tmp_path):
        config = GameConfig(game_width=4, game_height=3)
        source = Mock()
        source.capture.return_value = Frame(550, 609, 4, 3, bytes(48))
        pointer = Mock()
        pointer.position.return_value = Point(1, 2)
        path = str(tmp_path / "game.png")

        assert take_snapshot(source, pointer, Point(550, 609), config, path) == path
        source.capture.assert_called_once_with(550, 609, 4, 3)
        assert (tmp_path / "game.png").exists()


class TestMain:
    """Tests for argument handling in main()."""

    @patch('shot_assist.main.X11Pointer')
    @patch('shot_assist.main.X11FrameSource')
    def test_snapshot_mode(self, source_cls, pointer_cls, tmp_path):
        source = source_cls.return_value = make_source()
        source.capture.return_value = Frame(10, 20, 400, 720, bytes(400 * 720 * 4))
        pointer_cls.return_value.position.return_value = Point(0, 0)
        path = tmp_path / "out.png"

        assert main(["--game-x", "10", "--game-y", "20", "--snapshot", str(path)]) == 0

        source.capture.assert_called_once_with(10, 20, 400, 720)
        assert path.exists()
        source.close.assert_called_once()

    @patch('shot_assist.main.run_prompt')
    @patch('shot_assist.main.X11Pointer')
    @patch('shot_assist.main.X11FrameSource')
    def test_ready_mode_builds_executor(self, source_cls, pointer_cls, run_prompt_mock):
        source_cls.return_value = make_source()

        assert main(["--ready", "--unpaced", "--trigger", "saturation"]) == 0

        executor = run_prompt_mock.call_args.args[0]
        assert executor.game_origin == Point(550, 609)
        assert executor.config.paced is False
        assert executor.config.trigger_policy == "saturation"
        assert executor.policy.max_samples == 1000

    @patch('shot_assist.main.X11Pointer')
    @patch('shot_assist.main.X11FrameSource')
    def test_capture_error_exit_code(self, source_cls, pointer_cls, tmp_path):
        source = source_cls.return_value = make_source()
        source.capture.side_effect = CaptureError("no display")

        assert main(["--snapshot", str(tmp_path / "x.png")]) == 1

    @patch('shot_assist.main.X11Pointer')
    @patch('shot_assist.main.X11FrameSource')
    def test_missing_xtest_exit_code(self, source_cls, pointer_cls, capsys):
        source = source_cls.return_value = make_source()
        pointer_cls.side_effect = InputError("X server does not support the XTEST extension")

        assert main(["--ready"]) == 1
        assert "Error: X server does not support the XTEST extension" in capsys.readouterr().out
        source.close.assert_called_once()

    def test_bad_config_file(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--config", str(tmp_path / "missing.json")])
