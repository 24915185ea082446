# yanyuan-flowers

A guide to the flowers of a university campus. It bundles:

- a catalogue of 69 campus flowers with their bloom months, the places
  where they grow and a short botanical description (`yanyuan_flowers.flowers`);
- a campus map of 61 named places, with the flowers linked to each place
  and a character grid used for walking routes (`yanyuan_flowers.campus`);
- route finding on that grid that either seeks out flowers in bloom or
  keeps away from them to avoid pollen (`yanyuan_flowers.pathfinding`,
  `yanyuan_flowers.navigation`);
- a flower recognition quiz (`yanyuan_flowers.quiz`);
- a check-in log of flower sightings (`yanyuan_flowers.checkin`) and an
  album that pages through it (`yanyuan_flowers.album`);
- a command line over all of the above (`yanyuan_flowers.cli`).

## Installing

```
pip install .
```

The package needs nothing beyond the Python standard library
(Python 3.10 or later). To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `yanyuan-flowers`, with these
sub-commands (`yanyuan-flowers --help` lists them):

- `flowers [--month N]` prints id, name and bloom months of every flower,
  or only of those blooming in month N (0 means all).
- `locations [--month N]` prints the campus places; with `--month` only
  the places that have a flower blooming in that month (0: any flower).
- `info NAME` describes one flower and lists where it grows.
- `navigate START END [--avoid] [--month N] [--grid FILE] [--pixels]`
  plans a route between two named places and prints one `row,col` cell
  per line, or map pixel coordinates with `--pixels`.
- `checkin --location PLACE [--date yyyy-MM-dd] [--flower NAME]
  [--image FILE] [--log TEXT] [--log-file PATH] [--app-dir DIR]` appends
  a sighting to the text log (default `logs/checkin_logs.txt`). The date
  defaults to today; the place must be one of the campus places. With
  `--image`, the picture is copied to `DIR/resources/images/` under a new
  unique name and that relative path is recorded.
- `album [--log-file PATH]` prints the recorded sightings, newest first.

Each command exits with status 0 on success and 1 with a message on
standard error when it fails.

## Using it from Python

Browsing the catalogue:

```python
from yanyuan_flowers.flowers import default_catalog

catalog = default_catalog()
print(len(catalog))                      # 69
peony = catalog.by_name("牡丹")
print(peony.blooms_in(5))                # True
for flower in catalog.at_location("未名湖"):
    print(flower.id, flower.name)
```

`FlowerCatalog.by_id` and `by_name` return `None` when nothing matches.
`LocationManager` is a small name-to-coordinate registry whose `names()`
come back sorted.

The campus map and the places with flowers in bloom in a given month
(month 0 means any linked flower):

```python
from yanyuan_flowers.campus import CampusMap, default_locations, describe_flower
from yanyuan_flowers.flowers import default_flowers

campus = CampusMap(default_locations())
campus.link_flowers(default_flowers())
print(campus.position_of("博雅塔"))          # (59.0, 74.0)
print([loc.name for loc in campus.icon_locations(4)])
print(describe_flower(campus.flowers_at("博雅塔")[0]))
```

`CampusMap.nearest_location` finds the place closest (Manhattan distance)
to a pixel point on the map image, and `checkin_locations` the places
that appear in a list of check-in records.

### Routes

Routes are searched on a grid of 138 rows by 104 columns in which `0`
marks a cell that cannot be entered. A fresh `CampusMap` has an all-open
grid; `load_grid(path)` or `load_grid_lines(lines)` fill it from text,
skipping blank lines. Places with a flower blooming in the chosen month
are marked as flower cells before the search.

```python
from yanyuan_flowers.navigation import navigate, to_pixel

campus.load_grid("map_data.txt")
route = navigate(campus, "西门", "博雅塔", False, 4)   # seek April blooms
print(route[0], route[-1], to_pixel(route[-1]))
```

Passing `True` for the avoid flag uses `avoid_path`, which charges a
penalty for every step next to a flower cell; otherwise `flower_path`
rewards steps past flower cells that lie ahead. An empty name, an unknown
place or a search that finds no route raises `NavigationError`. The
search functions themselves (`flower_path`, `avoid_path`, `heuristic`)
work on any grid of strings and return a list of `(row, col)` cells,
empty when no route exists.

### Quiz

```python
from yanyuan_flowers.quiz import FlowerQuiz, candidates_at

quiz = FlowerQuiz(default_flowers())
question = quiz.next_flower()
result = quiz.answer(question.id)
print(result.correct, result.message)
```

Flowers come in random order without repeats until all have been shown.
`answer` poses the next question itself. A quiz with no flowers, or an
answer before any question, raises `QuizError`. `candidates_at(campus,
point)` gives the flowers at the place nearest a clicked map point.

## Check-in log

Sightings are appended to a plain text log, one labelled field per line
followed by a blank line:

```
日期: 2024-04-12
地点: 未名湖
花名: 山桃
图片路径: resources/images/<uuid>.jpg
日志: 湖边的山桃开了
```

`append_to_log`, `read_log` and `parse_log` write and read this format;
a record is complete once its `日志:` line is read. `load_json` and
`save_json` keep the same records as a JSON array instead (a missing or
unreadable JSON file loads as no records). `copy_image` copies a picture
under an application directory, and `sorted_by_date` orders records
newest first. Failures to write or read raise `CheckinError`.

`Album` (or `Album.from_log(path)`) shows the records newest first, one
page each, after a cover page and a title page, with `flip`,
`next_page`, `previous_page`, `go_to`, `page_label` and `current_record`.

## What it does not do

There is no graphical interface: nothing draws the map, the flower
icons, routes, photos or album pages, and no pictures are shown. The
package ships neither a map image nor a walking-grid file; routes are
only as good as the grid you load.