"""Shared pytest fixtures for the prosperity chart."""

import os

# pygame must run headless under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from pathlib import Path

from prosperity.config import CFG
from prosperity.entities import RawRecord
from prosperity.normalizer import build_dataset
from prosperity.scales import build_scales, compute_layout


BASE_DIR = Path(__file__).parent

HEADER = ("Civilization,Calendar System,Calendar Type,Start Date,End Date,"
          "Historical Period,Prosperity Score,Key Events")


def make_row(civilization, start, end, score, calendar_type="Solar", period="Period",
             events="Events", calendar_system="Calendar"):
    return RawRecord(
        civilization=civilization,
        calendar_system=calendar_system,
        calendar_type=calendar_type,
        start_date=start,
        end_date=end,
        period=period,
        score=score,
        key_events=events,
    )


@pytest.fixture
def base_dir():
    return BASE_DIR


@pytest.fixture
def cfg():
    return CFG(WIDTH=1200, HEIGHT=700)


@pytest.fixture
def rome_maya_rows():
    return [
        make_row("Rome", -500, 476, 80, "Solar", "Republic and Empire", "Punic Wars"),
        make_row("Maya", -2000, 900, 60, "Lunar", "Classic", "Long Count"),
    ]


@pytest.fixture
def sample_rows():
    return [
        make_row("Rome", -27, 180, 95, "Solar"),
        make_row("Rome", -509, -27, 70, "Solar"),
        make_row("China", -206, 220, 85, "Lunisolar"),
        make_row("Maya", 250, 900, 85, "Lunar"),
        make_row("China", 618, 907, 90, "Lunisolar"),
        make_row("Aztec", 1325, 1521, -10, "Ritual"),
    ]


@pytest.fixture
def dataset(sample_rows):
    return build_dataset(sample_rows)


@pytest.fixture
def layout(cfg):
    return compute_layout(cfg.WIDTH, cfg.HEIGHT, cfg)


@pytest.fixture
def scales(dataset, layout, cfg):
    return build_scales(dataset, layout, cfg)


@pytest.fixture
def write_csv(tmp_path):
    def _write(*lines, header=HEADER, name="data.csv"):
        path = tmp_path / name
        path.write_text("\n".join((header,) + lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
