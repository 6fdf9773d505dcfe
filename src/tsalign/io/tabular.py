"""Delimited text codec.

Reads a table with a header ``time,<col>...`` into one series per value
column and writes one or several series back to the same layout.

Blank fields mean "no sample" on read: each series holds exactly the
non-blank cells of its column. A dense multi-series write fills absent
samples with ``CsvConfig.fill_value``, so reading it back gives series with
explicit zeros where the inputs had gaps.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence

import pandas as pd

from tsalign.core.config import CsvConfig
from tsalign.core.errors import ECodecParse, EContractViolation
from tsalign.series.timeseries import TimeSeries

logger = logging.getLogger(__name__)


def from_csv(text: str, config: CsvConfig | None = None) -> list[TimeSeries[float]]:
    """Parse delimited text into one float series per value column.

    Args:
        text: Table with a header row followed by data rows
        config: Layout options (default: ``CsvConfig()``)

    Returns:
        Series in header column order

    Raises:
        ECodecParse: If the header has no time column, a row's field count
            differs from the header's, a timestamp cannot be parsed, or a
            value is not numeric
    """
    config = config or CsvConfig()

    try:
        table = pd.read_csv(
            io.StringIO(text),
            sep=config.delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise ECodecParse("Tabular input is empty") from exc
    except pd.errors.ParserError as exc:
        raise ECodecParse("Malformed row in tabular input", context={"error": str(exc)}) from exc

    # the tokenizer pads short rows, so they are caught on the raw records
    short = _short_rows(text, config.delimiter)
    if short:
        raise ECodecParse(
            "Malformed row in tabular input",
            context={"rows": short},
            fix_hint="Every data row needs one field per header column",
        )

    table = table.fillna("").apply(lambda col: col.str.strip())
    header = table.iloc[0].tolist()
    if header[0] != config.time_col:
        raise ECodecParse(
            f"First header column must be '{config.time_col}'",
            context={"header": header},
        )
    if len(header) < 2:
        raise ECodecParse("Header has no value columns", context={"header": header})

    body = table.iloc[1:]
    index = _parse_times(body.iloc[:, 0], config)

    result: list[TimeSeries[float]] = []
    for pos, name in enumerate(header[1:], start=1):
        raw = body.iloc[:, pos]
        present = (raw != "").to_numpy()
        try:
            # exact inverse of the repr written by to_csv
            values = tuple(float(v) for v in raw[present])
        except ValueError as exc:
            raise ECodecParse(
                f"Non-numeric value in column '{name}'",
                context={"column": name, "error": str(exc)},
            ) from exc
        result.append(TimeSeries(tuple(index[present]), values, dtype=float))

    logger.debug(
        "Parsed %d series from %d rows: %s",
        len(result),
        len(body),
        [len(s) for s in result],
    )
    return result


def to_csv(series: TimeSeries, config: CsvConfig | None = None) -> str:
    """Serialize a single series as ``time,value`` rows."""
    config = config or CsvConfig()
    frame = pd.DataFrame(
        {
            config.time_col: pd.DatetimeIndex(series.index),
            config.value_col: list(series.values),
        }
    )
    return _write(frame, config)


def to_csv_many(
    series: Sequence[TimeSeries],
    names: Sequence[str] | None = None,
    config: CsvConfig | None = None,
) -> str:
    """Serialize several series as columns over the union of their timestamps.

    Args:
        series: Series to write; each must have unique timestamps
        names: Column names (default: ``value1``, ``value2``, ...)
        config: Layout options. ``sparse_write`` leaves absent values blank,
            otherwise they are written as ``fill_value``.

    Raises:
        ValueError: If no series are given or ``names`` has the wrong length
        EContractViolation: If a series repeats a timestamp
    """
    config = config or CsvConfig()
    if not series:
        raise ValueError("At least one series is required")
    if names is None:
        names = [f"{config.value_col}{i + 1}" for i in range(len(series))]
    if len(names) != len(series):
        raise ValueError(f"Expected {len(series)} column names, got {len(names)}")

    columns = []
    for name, s in zip(names, series):
        if len(set(s.index)) != len(s):
            raise EContractViolation(
                "Series written jointly must have unique timestamps",
                context={"column": name},
            )
        columns.append(s.to_pandas(name=name))

    frame = pd.concat(columns, axis=1).sort_index()
    if not config.sparse_write:
        frame = frame.fillna(config.fill_value)
    frame.index.name = config.time_col
    frame = frame.reset_index()

    logger.debug(
        "Writing %d series over %d rows (sparse=%s)",
        len(series),
        len(frame),
        config.sparse_write,
    )
    return _write(frame, config)


def _short_rows(text: str, delimiter: str) -> list[int]:
    """Positions of data rows with fewer fields than the header."""
    records = [
        r
        for r in csv.reader(io.StringIO(text), delimiter=delimiter)
        if r and not (len(r) == 1 and not r[0].strip())
    ]
    if not records:
        return []
    width = len(records[0])
    return [pos for pos, r in enumerate(records[1:], start=1) if len(r) < width]


def _parse_times(raw: pd.Series, config: CsvConfig) -> pd.DatetimeIndex:
    fmt = config.time_format or "ISO8601"
    try:
        parsed = pd.to_datetime(raw, format=fmt)
    except (ValueError, TypeError) as exc:
        raise ECodecParse(
            "Unparseable timestamp",
            context={"format": fmt, "error": str(exc)},
        ) from exc
    if parsed.isna().any():
        raise ECodecParse("Missing timestamp in data row", context={"format": fmt})
    return pd.DatetimeIndex(parsed)


def _write(frame: pd.DataFrame, config: CsvConfig) -> str:
    if config.date_format is None:
        frame = frame.assign(
            **{config.time_col: [pd.Timestamp(t).isoformat() for t in frame[config.time_col]]}
        )
    return frame.to_csv(
        index=False,
        sep=config.delimiter,
        date_format=config.date_format,
        lineterminator="\n",
    )
