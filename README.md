# cmdbench

Building blocks for benchmarking commands from Python: format durations in a
fitting time unit, find statistical outliers in a set of timings, expand
parameter scans, hold the settings of a benchmark session, and export
benchmark results as Markdown, AsciiDoc, Emacs org-mode, CSV or JSON.

The package has no runtime dependencies beyond the standard library.

## Formatting durations

Durations are given in seconds. `cmdbench.units` chooses the unit from the
size of the value unless one is passed explicitly:

```python
from cmdbench.units import Unit, format_duration, format_duration_unit

format_duration(1.3, None)                  # "1.300 s"
format_duration(0.999, None)                # "999.0 ms"
format_duration(0.0005, None)               # "500.0 µs"
format_duration(1.3, Unit.MILLISECOND)      # "1300.0 ms"

text, unit = format_duration_unit(0.1057, None)
unit.short_name()                           # "ms"
```

`format_duration_value` returns the number without the unit suffix, together
with the unit that was used.

## Statistics and outlier detection

`cmdbench.stats` provides `minimum` and `maximum` for non-empty sequences
without NaNs (they raise `ValueError` otherwise), and outlier detection based
on modified Z-scores, `(x - median) / MAD`:

```python
from cmdbench.stats import num_outliers, modified_zscores

num_outliers([-0.2, 0.0, 0.2, 4.0])    # 1
num_outliers([])                       # 0
modified_zscores([1.0, 2.0, 3.0])
```

A point counts as an outlier when the absolute value of its modified Z-score
is larger than `OUTLIER_THRESHOLD`.

## Parameter scans

`tokenize` splits a comma-separated list of values; `\,` is a literal comma
and `\\` a literal backslash:

```python
from cmdbench.parameter import tokenize

tokenize(r"foo,hello\, world!,bar")   # ["foo", "hello, world!", "bar"]
```

`RangeStep` yields numeric values from a start to an end (inclusive) with a
step, for integers and `Decimal`s alike:

```python
from decimal import Decimal
from cmdbench.parameter import RangeStep, ParameterScanError

list(RangeStep(0, 10, 3))                                   # [0, 3, 6, 9]
len(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))      # 11

try:
    RangeStep(0, 10, 0)
except ParameterScanError as err:
    print(err)                                              # Zero is not a valid parameter step
```

Empty ranges, a zero step and ranges of more than 100,000 values are
rejected with `ParameterScanError`. `ParameterValue` wraps a text or numeric
parameter value and turns it into a string with `str()`.

## Session options

`cmdbench.options.Options` holds the settings of a benchmark session: run
bounds, warmup count, minimum benchmarking time, preparation, setup and
cleanup commands, failure handling, output style, sort orders, the executor
(raw, shell or mock), the input and output policies and the time unit.

`Options.from_arguments` builds them from a mapping keyed by long option
name (`"runs"`, `"min-runs"`, `"max-runs"`, `"warmup"`, `"shell"`,
`"output"`, `"input"`, `"style"`, `"sort"`, `"time-unit"` and so on), with
numbers given as strings as they come from a command line:

```python
from cmdbench.options import Options

options = Options.from_arguments({"runs": "5", "sort": "command"})
options.run_bounds.min, options.run_bounds.max   # (5, 5)
options.validate_against_command_list(3)
```

Invalid settings raise `OptionsError`, whose `kind` attribute names the
problem. `Shell.parse` splits a shell command line the way a POSIX shell
does and rejects an empty or malformed one. `CommandInputPolicy.open_stdin`
and `CommandOutputPolicy.open_streams` give the values to pass as `stdin`,
`stdout` and `stderr` to `subprocess`.

## Exporting results

Results are `BenchmarkResult` records from `cmdbench.markup`.

`CsvExporter().serialize(results)` writes one row per command with its mean,
standard deviation, median, user and system time, minimum, maximum and
parameter values. `JsonExporter().serialize(results)` writes every field of
every result, including the individual run times and exit codes, as
`{"results": [...]}`. Both return UTF-8 bytes.

The markup exporters (`MarkdownExporter`, `AsciidocExporter`,
`OrgmodeExporter`) render a table from `RelativeSpeedEntry` records, each a
result together with its relative speed, the standard deviation of that
speed and whether it is the fastest:

```python
from cmdbench.markdown import MarkdownExporter
from cmdbench.markup import determine_unit_from_results

exporter = MarkdownExporter()
exporter.table_row(["a", "b", "c"])          # "| a | b | c |\n"
table = exporter.table_results(entries, determine_unit_from_results(results))
```

`determine_unit_from_results` picks the unit suited to the first result's
mean, or seconds when there are no results.

## What the package does not do

The package does not run or time commands: there is no command-line tool, no
process runner and no CPU or wall-clock timer. The relative speeds shown by
the markup exporters are not computed by the package; the caller supplies
them in each `RelativeSpeedEntry`. The exporters return bytes or text and do
not write files themselves.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.