"""Check-in records: the text log, the JSON store and image copying."""

from __future__ import annotations

import json
import shutil
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_LOG_PATH = Path("logs") / "checkin_logs.txt"
IMAGE_DIR = "resources/images"

_LABELS = {
    "date": "日期:",
    "location": "地点:",
    "flower_name": "花名:",
    "image_path": "图片路径:",
    "log": "日志:",
}

_JSON_KEYS = {
    "date": "date",
    "location": "location",
    "flower_name": "flowerName",
    "image_path": "imagePath",
    "log": "log",
}


class CheckinError(Exception):
    """Raised when a check-in record or image cannot be read or stored."""


@dataclass
class CheckinRecord:
    """One visit: when, where, which flower, a photo and a note."""

    date: str = ""
    location: str = ""
    flower_name: str = ""
    image_path: str = ""
    log: str = ""


def format_date(year: int, month: int, day: int) -> str:
    """Format a date as yyyy-MM-dd."""
    return f"{year}-{month:02d}-{day:02d}"


def _record_text(record: CheckinRecord) -> str:
    return "".join(
        f"{label} {getattr(record, attr)}\n" for attr, label in _LABELS.items()
    ) + "\n"


def append_to_log(record: CheckinRecord, path: str | Path = DEFAULT_LOG_PATH) -> None:
    """Append a record to the text log in its labelled-lines form."""
    try:
        with open(path, "a", encoding="utf-8") as stream:
            stream.write(_record_text(record))
    except OSError as exc:
        raise CheckinError(f"cannot write check-in log {path}: {exc}") from exc


def parse_log(text: str) -> list[CheckinRecord]:
    """Parse the text log; a record is complete once its log line is read."""
    records: list[CheckinRecord] = []
    current = CheckinRecord()
    for line in text.splitlines():
        for attr, label in _LABELS.items():
            if line.startswith(label + " "):
                setattr(current, attr, line[len(label):].strip())
                if attr == "log":
                    records.append(current)
                    current = CheckinRecord()
                break
    return records


def read_log(path: str | Path = DEFAULT_LOG_PATH) -> list[CheckinRecord]:
    """Read and parse the text log at path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CheckinError(f"cannot open check-in log {path}: {exc}") from exc
    return parse_log(text)


def _from_json_entry(entry: object) -> CheckinRecord:
    if not isinstance(entry, dict):
        return CheckinRecord()
    values = {}
    for attr, key in _JSON_KEYS.items():
        value = entry.get(key)
        values[attr] = value if isinstance(value, str) else ""
    return CheckinRecord(**values)


def load_json(path: str | Path = DEFAULT_LOG_PATH) -> list[CheckinRecord]:
    """Load records from a JSON array; a missing or unreadable store yields no records."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return []
    if not isinstance(data, list):
        return []
    return [_from_json_entry(entry) for entry in data]


def save_json(records: Iterable[CheckinRecord], path: str | Path = DEFAULT_LOG_PATH) -> None:
    """Write records to path as a JSON array."""
    payload = [
        {key: asdict(record)[attr] for attr, key in _JSON_KEYS.items()}
        for record in records
    ]
    try:
        Path(path).write_text(
            json.dumps(payload, ensure_ascii=False, indent=4) + "\n", encoding="utf-8"
        )
    except OSError as exc:
        raise CheckinError(f"cannot write check-in store {path}: {exc}") from exc


def copy_image(source: str | Path, app_dir: str | Path) -> str:
    """Copy an image under app_dir with a fresh unique name; return its relative path."""
    source = Path(source)
    target_dir = Path(app_dir) / IMAGE_DIR
    suffix = source.name.rpartition(".")[2] if "." in source.name else ""
    new_name = f"{uuid.uuid4()}.{suffix}"
    destination = target_dir / new_name
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        if destination.exists():
            raise FileExistsError(destination)
        shutil.copyfile(source, destination)
    except OSError as exc:
        raise CheckinError(f"cannot copy image {source} -> {destination}: {exc}") from exc
    return f"{IMAGE_DIR}/{new_name}"


def sorted_by_date(records: Iterable[CheckinRecord]) -> list[CheckinRecord]:
    """Return records ordered by date, newest first."""
    return sorted(records, key=lambda r: r.date, reverse=True)