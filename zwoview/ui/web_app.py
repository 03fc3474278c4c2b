"""NiceGUI web preview for .zwo workouts."""

from __future__ import annotations

from dataclasses import dataclass

from nicegui import events, ui

from zwoview.ui.charts import profile_chart_options
from zwoview.ui.formatting import (
    DisplayOptions,
    describe_group,
    describe_segment,
    format_clock,
    segment_color,
    segment_title,
    zone_caption,
)
from zwoview.workout.analytics import (
    total_duration,
    training_stress,
    zone_distribution,
)
from zwoview.workout.model import Segment, Workout
from zwoview.workout.parser import FormatError, parse_zwo
from zwoview.workout.zones import zone_color, zone_name


@dataclass
class PreviewState:
    workout: Workout | None = None
    error: str | None = None
    ftp_watts: int = 230
    show_watts: bool = False

    @property
    def options(self) -> DisplayOptions:
        return DisplayOptions(ftp_watts=self.ftp_watts, show_watts=self.show_watts)


def segment_row(segment: Segment, options: DisplayOptions) -> None:
    with ui.row().classes("w-full items-center gap-3"):
        ui.element("div").style(
            f"width: 4px; height: 32px; border-radius: 2px;"
            f" background: {segment_color(segment)}"
        )
        with ui.column().classes("gap-0"):
            ui.label(segment_title(segment)).classes("text-sm font-medium")
            ui.label(
                f"{describe_segment(segment, options)} · {zone_caption(segment)}"
            ).classes("text-xs zw-muted")


def _build_page(initial: DisplayOptions) -> None:
    state = PreviewState(ftp_watts=initial.ftp_watts, show_watts=initial.show_watts)
    ui.add_head_html(
        """
        <style>
          body { background: #0f0f0f; color: #eaeaea; }
          .zw-card {
            background: #141414;
            border: 1px solid rgba(255, 255, 255, 0.08);
            border-radius: 12px;
          }
          .zw-muted { opacity: 0.6; }
        </style>
        """
    )

    with ui.row().classes("w-full items-center gap-4"):
        ui.label("zwo preview").classes("text-xl font-semibold")
        ui.space()
        upload = ui.upload(label="Import .zwo", auto_upload=True).props(
            'accept=".zwo,application/xml,text/xml"'
        )
        ftp_input = ui.number("FTP (W)", value=state.ftp_watts, min=1, format="%d")
        watts_switch = ui.switch("Watts", value=state.show_watts)

    empty_view = ui.column().classes("w-full items-center gap-2 zw-muted")
    with empty_view:
        ui.label("Drop a .zwo file here to preview")
        error_label = ui.label("").classes("text-red-400")

    with ui.row().classes("w-full gap-4 no-wrap") as workout_view:
        with ui.card().classes("w-[500px] zw-card"):
            title_label = ui.label("").classes("text-lg font-semibold")
            summary_label = ui.label("").classes("text-sm zw-muted")
            segment_list = ui.column().classes("w-full gap-2")
        with ui.column().classes("grow gap-4"):
            with ui.card().classes("w-full zw-card"):
                ui.label("Profile").classes("text-base font-medium")
                chart = ui.echart(profile_chart_options([], state.options)).classes(
                    "w-full h-56"
                )
            with ui.card().classes("w-full zw-card"):
                ui.label("Zone Distribution").classes("text-base font-medium")
                zone_rows = ui.column().classes("w-full gap-1")

    def refresh() -> None:
        workout = state.workout
        empty_view.set_visibility(workout is None)
        workout_view.set_visibility(workout is not None)
        error_label.set_text(state.error or "")
        if workout is None:
            return

        options = state.options
        total = total_duration(workout.segments)
        title_label.set_text(workout.name or "Untitled Workout")
        summary_label.set_text(
            f"{format_clock(total)} • {len(workout.segments)} intervals"
            f" • TSS {training_stress(workout.segments)}"
        )

        segment_list.clear()
        with segment_list:
            for node in workout.nodes:
                if node.kind == "group":
                    ui.label(describe_group(node, options)).classes(
                        "text-sm font-semibold"
                    )
                    with ui.column().classes("w-full gap-2 pl-4"):
                        for segment in node.segments:
                            segment_row(segment, options)
                else:
                    segment_row(node, options)

        zone_rows.clear()
        with zone_rows:
            for key, seconds, share in zone_distribution(workout.segments):
                with ui.row().classes("w-full items-center gap-2"):
                    ui.label(f"{key} {zone_name(key)}").classes("text-xs w-32")
                    with ui.element("div").classes("grow"):
                        ui.element("div").style(
                            f"width: {share * 100:.1f}%; height: 8px; border-radius: 4px;"
                            f" background: {zone_color(key)}"
                        )
                    ui.label(format_clock(seconds)).classes("text-xs w-16 text-right")

        chart.options.clear()
        chart.options.update(profile_chart_options(workout.segments, options))
        chart.update()

    async def on_upload(e: events.UploadEventArguments) -> None:
        payload = await e.file.read()
        try:
            state.workout = parse_zwo(payload)
            state.error = None
        except FormatError as exc:
            state.workout = None
            state.error = f"Invalid .zwo: {exc}"
            ui.notify(state.error, color="negative")
        upload.reset()
        refresh()

    def on_ftp_change() -> None:
        state.ftp_watts = max(1, int(ftp_input.value or 0))
        refresh()

    def on_watts_toggle() -> None:
        state.show_watts = bool(watts_switch.value)
        refresh()

    upload.on_upload(on_upload)
    ftp_input.on_value_change(lambda _: on_ftp_change())
    watts_switch.on_value_change(lambda _: on_watts_toggle())

    refresh()


def run_web_ui(
    *,
    host: str = "127.0.0.1",
    port: int = 8088,
    options: DisplayOptions | None = None,
) -> int:
    initial = options or DisplayOptions()

    @ui.page("/")
    def index() -> None:
        _build_page(initial)

    ui.run(host=host, port=port, reload=False, title="zwo preview")
    return 0
