# dockterm

Building blocks for a terminal UI that manages containers: string and table
formatting, colour handling, a set of translated UI strings in nine
languages, a manager for cancellable background tasks, and a logger set up
for development or production use.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Text and table helpers

`dockterm.utils` holds the formatting functions used to draw panels.

```python
from dockterm.utils import render_table, split_lines, with_padding, format_binary_bytes

render_table([["aaaa", "b"], ["c", "d"]])
# 'aaaa b\nc    d'

split_lines("hello world !\nhello universe !\n")
# ['hello world !', 'hello universe !']

with_padding("hello world !", 14)
# 'hello world ! '

format_binary_bytes(0)
# '0B'
```

Rows passed to `render_table` must all have the same number of cells;
otherwise it raises `ValueError`. Column widths are measured on the visible
text, so ANSI colour codes (stripped by `decolorise`) and wide characters
are accounted for.

Other helpers include:

- `normalize_linefeeds` – turns `\r\n` into `\n` and drops stray `\r`.
- `resolve_placeholder_string` – fills `{{key}}` placeholders from a dict.
- `colored_string`, `multi_colored_string`, `colored_yaml_string`,
  `opens_menu_style` – ANSI colouring; `get_color_attribute` maps a colour
  name such as `"red"` or `"bold"` to an attribute (unknown names, and
  `"default"`, give white, which `colored_string` leaves uncoloured).
- `format_map`, `format_map_item` – indented, sorted key/value listings.
- `format_binary_bytes`, `format_decimal_bytes` – human-readable sizes.
- `with_short_sha` – shortens 64-character words in a command to 10.
- `safe_truncate`, `is_valid_hex_value`, `loader`.
- `apply_template` – fills `{{ .Field }}` actions from a mapping or object,
  HTML-escaping the values; a malformed template raises `ValueError`.
- `marshal_into_yaml`, `marshal_into_format` – dump data (including
  dataclasses) as indented JSON or as YAML keeping the top-level key order;
  an unknown format raises `ValueError`.
- `close_many` – closes every object given and reports all failures
  together as a `MultipleErrors`.

## Translations

`dockterm.i18n` provides a `TranslationSet` dataclass of UI strings. English
is complete; Chinese, Dutch, French, German, Polish, Portuguese, Spanish and
Turkish fill in what they translate and fall back to English for the rest.

```python
import logging
from dockterm.i18n.localizer import new_translation_set, new_translation_set_from_config

log = logging.getLogger("dockterm")

tr = new_translation_set(log, "fr_FR")
tr.confirm
# 'Confirmer'

tr = new_translation_set_from_config(log, "auto")  # detect from the environment
```

A language code picks every set whose code it starts with. Asking
`new_translation_set_from_config` for a language that has no set raises
`LanguageNotFoundError`, whose `fallback` attribute holds the English set.
`get_translation_sets` returns all sets keyed by language code.
`detect_system_language` reads the language from `LC_ALL`, `LC_MESSAGES` or
`LANG`, and `detect_language` wraps a detector, falling back to `"C"` when
it fails.

To list the strings each language still lacks:

```
dockterm-translations
```

## Background tasks

`dockterm.tasks.TaskManager` runs one task at a time, each on its own
thread. A task is a function taking a `threading.Event` that is set when it
should return. `new_task(f)` stops the running task before starting `f`;
if several tasks are requested while waiting, only the most recent runs.
`new_ticker_task(duration, before, f)` calls the optional `before`, then
calls `f` straight away and once per `duration` (seconds or a `timedelta`)
until the task is cancelled or `f` sets the second event it is given.
`close()` stops the current task, printing a warning if it has not stopped
within `close_timeout` seconds (three by default).

## Logging

`dockterm.log.new_logger(debug, version, commit, build_date, config_dir)`
returns a `logging.LoggerAdapter` that carries the version, commit and
build date with every record. With `debug` true, or the `DEBUG` environment
variable set to `TRUE`, it writes one JSON object per record to
`development.log` in `config_dir`, at the level named by `LOG_LEVEL` (see
`get_log_level`, which defaults to debug); otherwise records are discarded.

## What this package does not do

It contains no terminal interface of its own and does not talk to a
container engine: there are no panels, key bindings or commands for
containers, images, volumes or networks. It supplies the helpers such an
interface would build on.