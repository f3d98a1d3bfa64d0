# repofetch

Building blocks for a Git repository summary in the terminal. Each piece of
information (project name, languages, pending changes, version, size, licence,
last change, lines of code) is an info field: an object with a `title()` and a
`value()` that can write itself as an ANSI-styled line and turn itself into a
dictionary. `Info` puts the fields together under a title line, adds a colour
palette, and can also produce a dictionary or pretty-printed JSON.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install ".[test]"
pytest
```

## Modules

- `repofetch.styling`: colours (`AnsiColor`, `RgbColor`), `Style` with
  `paint(text)`, `num_to_color` (numbers 0–15 to ANSI colours, anything else
  to the default colour), `get_style`, `paint` (foreground) and `on_color`
  (background).
- `repofetch.utils`: `format_number` with a `NumberSeparator` (`PLAIN`,
  `COMMA`, `SPACE` using a narrow no-break space, `UNDERSCORE`);
  `format_time` renders a Unix timestamp as `YYYY-MM-DDTHH:MM:SSZ` or as a
  relative time; `to_human_time` and `human_time` produce phrases such as
  `now`, `34 minutes ago` or `a year ago`. Negative timestamps give
  `<before UNIX epoch>`, and a timestamp in the future raises
  `TimeTravelError`.
- `repofetch.text_colors`: `TextColors.from_numbers` builds the colours of the
  title, tilde, underline, subtitle, colon and values from colour numbers,
  falling back to the logo's primary colour or the default colour.
- `repofetch.info_field`: the abstract `InfoField` base class
  (`write_styled`, `style_title`, `style_value`, `to_dict`) and the `InfoType`
  enum naming the fields that can be turned off.
- `repofetch.languages`: `LanguagesInfo` (built with `from_loc` from
  `(language, lines)` pairs) with its coloured bar of 26 cells, plus
  `prepare_languages`, `build_language_bar`, `sort_by_loc`, `get_total_loc`
  and `get_main_language`. Languages beyond the number to display are merged
  into `Other`.
- `repofetch.last_change`: `LastChangeInfo.from_timestamp`.
- `repofetch.loc`: `LocInfo.from_loc`, the total lines of code.
- `repofetch.pending`: `ChangeKind` and `PendingInfo.from_changes`, shown as
  e.g. `4+- 2+ 1-`.
- `repofetch.version`: `VersionInfo` and `get_version`, which picks the tag
  with the most recent commit, else the manifest's version.
- `repofetch.size`: `SizeInfo.from_entry_sizes` and
  `bytes_to_human_readable` (binary units, up to two decimals).
- `repofetch.project`: `ProjectInfo` and `get_repo_name`, which takes the name
  from an HTTP(S), SSH or scp-like remote URL, else from the manifest.
- `repofetch.license`: `LicenseInfo`, `is_license_file` and
  `find_license_files`.
- `repofetch.title`: `Title`, the `user ~ git version` header with its
  underline.
- `repofetch.info`: `Info` (`str()`, `to_dict`, `to_json`) and
  `select_fields`, which drops disabled fields and builds the others lazily.

## Example

```python
from repofetch.utils import NumberSeparator, format_number
from repofetch.size import SizeInfo, bytes_to_human_readable
from repofetch.project import ProjectInfo

format_number(1_000_000, NumberSeparator.COMMA)      # "1,000,000"
bytes_to_human_readable(2577152)                     # "2.46 MiB"

size = SizeInfo.from_entry_sizes([1024, 2048], NumberSeparator.PLAIN)
size.value()                                         # "3 KiB (2 files)"

project = ProjectInfo(repo_name="demo", number_of_branches=3, number_of_tags=2)
project.value()                                      # "demo (3 branches, 2 tags)"
```

## What it does not do

The package formats and assembles information; it does not gather it. It
does not open or read Git repositories, walk commit history, compute the
working-tree status, count lines of code per language, read project
manifests, or identify a licence from the text of a licence file. It has no
command-line program and draws no ASCII art or images: the caller supplies
the data (timestamps, tag times, change kinds, index entry sizes, remote URL,
licence name) and prints the resulting text.