"""Tests for the cairo rasteriser and the command line."""

import datetime

import pytest

from until_wall import cli
from until_wall.life_calendar import LifeCalendar
from until_wall.markers import MarkerStyleCode
from until_wall.raster import parse_color, parse_path, to_png, write_frames, write_pdf
from until_wall.request import OutputFormat, RenderRequest
from until_wall.shapes import VectorDocument

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestParseColor:
    def test_hex(self):
        assert parse_color("#ffffff") == (1.0, 1.0, 1.0)
        assert parse_color("#000") == (0.0, 0.0, 0.0)
        assert parse_color("#ff0000") == (1.0, 0.0, 0.0)

    def test_css_names_and_functions(self):
        assert parse_color("White") == (1.0, 1.0, 1.0)
        assert parse_color("red") == (1.0, 0.0, 0.0)
        assert parse_color("rebeccapurple") == (0x66 / 255, 0x33 / 255, 0x99 / 255)
        assert parse_color("rgb(0, 255, 0)") == (0.0, 1.0, 0.0)

    def test_alpha_is_dropped(self):
        assert parse_color("#ff000080") == (1.0, 0.0, 0.0)

    @pytest.mark.parametrize("color", ["ff0000", "#gggggg", "not-a-color", ""])
    def test_unsupported(self, color):
        with pytest.raises(ValueError, match="Unsupported color"):
            parse_color(color)


class TestParsePath:
    def test_implicit_lineto_after_moveto(self):
        assert parse_path("M0 0 10 10") == [("M", (0.0, 0.0)), ("L", (10.0, 10.0))]
        assert parse_path("m1 2 3 4z") == [("m", (1.0, 2.0)), ("l", (3.0, 4.0)), ("z", ())]

    def test_packed_numbers(self):
        assert parse_path("c1.74 0 3.41.81 4.5 2.09") == [
            ("c", (1.74, 0.0, 3.41, 0.81, 4.5, 2.09))
        ]
        assert parse_path("l7-3-1-2") == [("l", (7.0, -3.0)), ("l", (-1.0, -2.0))]

    def test_unsupported_command(self):
        with pytest.raises(ValueError, match="Unsupported path command"):
            parse_path("M0 0 A 5 5 0 0 1 10 10")

    def test_number_without_command(self):
        with pytest.raises(ValueError, match="without a command"):
            parse_path("10 10")

    def test_missing_arguments(self):
        with pytest.raises(ValueError, match="expects 6 numbers"):
            parse_path("M0 0 C1 2 3")


def _small_document(today, **overrides) -> VectorDocument:
    request = RenderRequest(
        start_date=datetime.date(2024, 1, 1),
        end_date=datetime.date(2024, 2, 29),
        width=120,
        height=240,
        **overrides,
    )
    return LifeCalendar(request, today=today).gen_document()


class TestRaster:
    @pytest.mark.parametrize("style", list(MarkerStyleCode))
    def test_every_style_rasterizes(self, today, style):
        png = to_png(_small_document(today, marker_style=style, goal_text="Go\nOn"))
        assert png.startswith(PNG_SIGNATURE)

    def test_zero_sized_canvas(self, today):
        document = VectorDocument(width=0, height=0, background="#000000", primitives=())
        assert to_png(document).startswith(PNG_SIGNATURE)

    def test_pdf(self, today, tmp_path):
        path = write_pdf(_small_document(today), tmp_path / "calendar.pdf")
        assert path.read_bytes().startswith(b"%PDF")

    def test_frames(self, today, tmp_path):
        frames = LifeCalendar(_request_for_frames(), today=today, frame_count=3).gen_frames()
        paths = write_frames(frames, tmp_path / "frames")

        assert [path.name for path in paths] == ["frame_000.png", "frame_001.png", "frame_002.png"]
        assert all(path.read_bytes().startswith(PNG_SIGNATURE) for path in paths)


def _request_for_frames():
    return RenderRequest(
        start_date=datetime.date(2024, 1, 1),
        end_date=datetime.date(2024, 1, 15),
        width=90,
        height=160,
        output_format=OutputFormat.RASTER_ANIMATED_SEQUENCE,
    )


class TestCli:
    def test_svg(self, tmp_path, capsys):
        out = tmp_path / "wall.svg"
        cli.main(["2024-01-01", "2024-01-31", "-f", str(out), "--today", "2024-01-08"])

        svg = out.read_text(encoding="utf-8")
        assert svg.count("<circle") == 31
        assert "24d until" in svg
        assert f"Created {out}" in capsys.readouterr().out

    def test_png_with_device(self, tmp_path):
        out = tmp_path / "wall"
        cli.main(["2024-01-01", "2024-03-01", "-f", str(out), "-d", "iPhone Xs", "-s", "2"])
        assert (tmp_path / "wall.png").read_bytes().startswith(PNG_SIGNATURE)

    def test_unknown_extension_is_replaced(self, tmp_path, capsys):
        out = tmp_path / "wall.jpg"
        cli.main(["2024-01-01", "2024-01-15", "-f", str(out), "--width", "90", "--height", "160"])

        assert (tmp_path / "wall.png").exists()
        assert "Warning: Replacing '.jpg' extension with '.png'" in capsys.readouterr().out

    def test_frames(self, tmp_path):
        cli.main(
            [
                "2024-01-01",
                "2024-01-15",
                "--frames",
                str(tmp_path / "frames"),
                "--today",
                "2024-01-08",
                "--width",
                "90",
                "--height",
                "160",
            ]
        )
        assert len(list((tmp_path / "frames").glob("frame_*.png"))) == 15

    def test_goal_text_newlines(self, tmp_path):
        out = tmp_path / "wall.svg"
        cli.main(["2024-01-01", "2024-01-15", "-f", str(out), "-g", "One\\nTwo"])

        svg = out.read_text(encoding="utf-8")
        assert ">One</tspan>" in svg
        assert ">Two</tspan>" in svg

    def test_bad_color_is_reported(self, tmp_path, capsys):
        with pytest.raises(ValueError):
            cli.main(["-f", str(tmp_path / "x.png"), "--bg-color", "not-a-color"])
        assert "Error: Unsupported color" in capsys.readouterr().out
