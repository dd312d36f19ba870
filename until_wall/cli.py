import argparse
import logging
from pathlib import Path

from until_wall.animation import FPS
from until_wall.dates import parse_date
from until_wall.life_calendar import LifeCalendar
from until_wall.markers import MarkerStyleCode
from until_wall.presets import DEVICE_PRESETS, find_preset
from until_wall.raster import write_frames, write_pdf, write_png
from until_wall.request import (
    DEFAULT_BACKGROUND,
    DEFAULT_CURRENT_COLOR,
    DEFAULT_END_DATE,
    DEFAULT_FUTURE_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_MARKER_SCALE,
    DEFAULT_MARKER_STYLE,
    DEFAULT_PAST_COLOR,
    DEFAULT_START_DATE,
    DEFAULT_WIDTH,
    OutputFormat,
    Palette,
    ProgressMode,
    RenderRequest,
    SafeArea,
)

DEFAULT_FILENAME: str = "until_wall.png"
SUPPORTED_SUFFIXES: tuple[str, ...] = (".png", ".svg", ".pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="until-wall",
        description="Generate a day-by-day life calendar wallpaper between two dates",
    )

    parser.add_argument(
        "start_date",
        type=parse_date,
        nargs="?",
        default=DEFAULT_START_DATE,
        help=f"First day of the calendar, YMD or DMY (default is {DEFAULT_START_DATE})",
    )
    parser.add_argument(
        "end_date",
        type=parse_date,
        nargs="?",
        default=DEFAULT_END_DATE,
        help=f"Last day of the calendar, YMD or DMY (default is {DEFAULT_END_DATE})",
    )
    parser.add_argument(
        "-f",
        "--filename",
        type=str,
        dest="filename",
        default=DEFAULT_FILENAME,
        help=f"Output file, .png, .svg or .pdf (default is '{DEFAULT_FILENAME}')",
    )
    parser.add_argument(
        "--frames",
        type=Path,
        dest="frames_dir",
        default=None,
        help=f"Write the pulse animation as numbered PNG frames ({FPS} fps) into this directory",
    )
    parser.add_argument(
        "--today",
        type=parse_date,
        default=None,
        help="Date to treat as today (default is the current date)",
    )

    canvas = parser.add_argument_group("canvas")
    canvas.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Canvas width in px")
    canvas.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Canvas height in px")
    canvas.add_argument(
        "-d",
        "--device",
        type=str,
        choices=[preset.name for preset in DEVICE_PRESETS],
        default=None,
        help="Use the size and safe area of a device preset",
    )
    canvas.add_argument(
        "-w",
        "--widgets",
        action="store_true",
        dest="has_widgets",
        help="Keep the top 15%% of the canvas free for home screen widgets",
    )
    for edge in ("top", "bottom", "left", "right"):
        canvas.add_argument(
            f"--offset-{edge}",
            type=float,
            default=0.0,
            help=f"Safe area inset on the {edge} edge, in percent",
        )

    markers = parser.add_argument_group("markers")
    markers.add_argument(
        "-s",
        "--style",
        type=int,
        dest="marker_style",
        default=DEFAULT_MARKER_STYLE,
        metavar="[0-11]",
        help=", ".join(f"{code.value}={code.name.lower()}" for code in MarkerStyleCode),
    )
    markers.add_argument(
        "--scale",
        type=float,
        dest="marker_scale",
        default=DEFAULT_MARKER_SCALE,
        help="Marker size multiplier, does not move the grid",
    )
    markers.add_argument("--bg-color", default=DEFAULT_BACKGROUND)
    markers.add_argument("--past-color", default=DEFAULT_PAST_COLOR)
    markers.add_argument("--current-color", default=DEFAULT_CURRENT_COLOR)
    markers.add_argument("--future-color", default=DEFAULT_FUTURE_COLOR)

    text = parser.add_argument_group("text")
    text.add_argument(
        "--hide-text", action="store_false", dest="show_text", help="Hide the progress text"
    )
    text.add_argument(
        "-e",
        "--elapsed",
        action="store_true",
        help="Count days elapsed since the start instead of days left",
    )
    text.add_argument(
        "-g",
        "--goal-text",
        type=str,
        default="",
        help="Goal text above the grid, '\\n' separates lines",
    )
    text.add_argument("--goal-color", type=str, default=None, help="Defaults to the current color")
    text.add_argument(
        "--goal-offset",
        type=float,
        dest="goal_text_top_offset",
        default=0.0,
        help="Extra top offset of the goal text, in percent of the height",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return parser


def request_from_args(args: argparse.Namespace, output_format: OutputFormat) -> RenderRequest:
    request = RenderRequest(
        start_date=args.start_date,
        end_date=args.end_date,
        width=args.width,
        height=args.height,
        has_widgets=args.has_widgets,
        safe_area=SafeArea(
            top=args.offset_top,
            bottom=args.offset_bottom,
            left=args.offset_left,
            right=args.offset_right,
        ),
        marker_style=args.marker_style,
        marker_scale=args.marker_scale,
        show_text=args.show_text,
        progress_mode=ProgressMode.ELAPSED if args.elapsed else ProgressMode.UNTIL,
        goal_text=args.goal_text.replace("\\n", "\n"),
        goal_color=args.goal_color,
        goal_text_top_offset=args.goal_text_top_offset,
        palette=Palette(
            background=args.bg_color,
            past=args.past_color,
            current=args.current_color,
            future=args.future_color,
        ),
        output_format=output_format,
    )
    if args.device:
        request = find_preset(args.device).apply(request)
    return request


def resolve_filename(filename: str) -> Path:
    file_path = Path(filename)
    if not file_path.suffix:
        return file_path.with_suffix(".png")
    if file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        print(f"Warning: Replacing '{file_path.suffix}' extension with '.png'")
        return file_path.with_suffix(".png")
    return file_path


def main(argv: list[str] | None = None) -> None:
    args: argparse.Namespace = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.frames_dir is not None:
            request = request_from_args(args, OutputFormat.RASTER_ANIMATED_SEQUENCE)
            frames = LifeCalendar(request, today=args.today).gen_frames()
            paths = write_frames(frames, args.frames_dir)
            print(f"Created {len(paths)} frames in {args.frames_dir}")
            return

        path = resolve_filename(args.filename)
        suffix = path.suffix.lower()
        output_format = (
            OutputFormat.VECTOR_PREVIEW if suffix == ".svg" else OutputFormat.RASTER_STATIC
        )
        calendar = LifeCalendar(request_from_args(args, output_format), today=args.today)

        if suffix == ".svg":
            path.write_text(calendar.gen_svg(), encoding="utf-8")
        elif suffix == ".pdf":
            write_pdf(calendar.gen_document(), path)
        else:
            write_png(calendar.gen_document(), path)

    except Exception as e:
        print(f"Error: {e}")
        raise

    print(f"Created {path}")


if __name__ == "__main__":
    main()
