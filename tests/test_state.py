from pathlib import Path

from PIL import Image

from conftest import FOUR_COLOR_PALETTE
from png2pal.errors import NotIndexedError
from png2pal.state import NO_FILE_SELECTED, AppState, convert_selected, select_file


def _unreachable_converter(path):
    raise AssertionError(f"converter should not run for {path}")


def test_select_file_stores_path_and_clears_status() -> None:
    state = AppState(status="Saved 4 colors to old.pal")

    select_file(state, lambda: Path("new.png"))

    assert state.selected_path == Path("new.png")
    assert state.status == ""


def test_dismissed_dialog_without_selection_shows_message() -> None:
    state = AppState()

    select_file(state, lambda: None)

    assert state.selected_path is None
    assert state.status == NO_FILE_SELECTED == "No file selected."


def test_dismissed_dialog_keeps_previous_selection() -> None:
    state = AppState(selected_path=Path("keep.png"), status="Saved 2 colors to keep.pal")

    select_file(state, lambda: None)

    assert state.selected_path == Path("keep.png")
    assert state.status == "Saved 2 colors to keep.pal"


def test_convert_without_selection_skips_pipeline() -> None:
    state = AppState()

    convert_selected(state, _unreachable_converter)

    assert state.status == NO_FILE_SELECTED


def test_convert_success_sets_message(four_color_png: Path) -> None:
    state = AppState(selected_path=four_color_png)

    convert_selected(state)

    output = four_color_png.with_suffix(".pal")
    assert state.status == f"Saved 4 colors to {output}"
    assert output.exists()


def test_convert_error_shows_description_and_allows_retry(four_color_png: Path) -> None:
    def failing(path):
        raise NotIndexedError("PNG is not indexed.")

    state = AppState(selected_path=four_color_png)
    convert_selected(state, failing)
    assert state.status == "PNG is not indexed."

    convert_selected(state)
    assert state.status.startswith("Saved 4 colors")


def test_convert_missing_file_reports_error(tmp_path: Path) -> None:
    state = AppState(selected_path=tmp_path / "gone.png")

    convert_selected(state)

    assert state.status.startswith("Failed to open PNG")


def test_convert_oversized_image_replaces_stale_status(write_png, monkeypatch) -> None:
    path = write_png("large.png", width=64, height=64, palette=FOUR_COLOR_PALETTE)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    state = AppState(selected_path=path, status="Saved 4 colors to earlier.pal")

    convert_selected(state)

    assert state.status.startswith("Cannot size PNG frame buffer")
