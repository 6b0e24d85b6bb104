"""Workspace scaffolding: fetching puzzle inputs and creating a day's files."""

from __future__ import annotations

import os
from pathlib import Path

import jinja2
import requests

INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"
SOLUTIONS_DIR = "solutions"
TEMPLATES_DIR = "templates"
DAY_TEMPLATE = "day.py.j2"
MANIFEST = "__init__.py"
INPUT_FILE = "input.txt"
REQUEST_TIMEOUT = 30

PathLike = str | os.PathLike


def _year_dir(root: PathLike, year: int) -> Path:
    return Path(root) / SOLUTIONS_DIR / f"y{year}"


def get_user_input(year: int, day: int, session_id: str) -> str:
    """Download the puzzle input of one day with the given session cookie."""
    response = requests.get(
        INPUT_URL.format(year=year, day=day),
        headers={"Cookie": f"session={session_id}"},
        timeout=REQUEST_TIMEOUT,
    )
    return response.text


def bootstrap_day(year: int, day: int, session_id: str, root: PathLike = ".") -> None:
    """Register a day, create its input folder, download its input and template it."""
    append_day_mod(year, day, root)
    input_dir = _year_dir(root, year) / f"d{day:02}"
    input_dir.mkdir()
    user_input = get_user_input(year, day, session_id)
    (input_dir / INPUT_FILE).write_text(user_input, encoding="utf-8", newline="")
    template_day(year, day, root)


def append_day_mod(year: int, day: int, root: PathLike = ".") -> None:
    """Add the day's import to the year's manifest, keeping its lines sorted."""
    manifest = _year_dir(root, year) / MANIFEST
    lines = manifest.read_text(encoding="utf-8").split("\n")
    entry = f"from . import d{day:02}"
    if entry not in lines:
        lines.append(entry)
    manifest.write_text("\n".join(sorted(lines)), encoding="utf-8", newline="")


def load_day_input(year: int, day: int, root: PathLike = ".") -> str:
    """Read the stored input of one day."""
    path = _year_dir(root, year) / f"d{day:02}" / INPUT_FILE
    print(f"Reading file {path}")
    return path.read_text(encoding="utf-8")


def template_day(year: int, day: int, root: PathLike = ".") -> None:
    """Render the day template into the year's solutions folder."""
    environment = jinja2.Environment(
        loader=jinja2.FileSystemLoader(Path(root) / TEMPLATES_DIR),
        keep_trailing_newline=True,
    )
    content = environment.get_template(DAY_TEMPLATE).render(day=day, year=year)
    target = _year_dir(root, year) / f"d{day:02}.py"
    target.write_text(content, encoding="utf-8", newline="")