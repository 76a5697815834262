# topmark:header:start
#
#   project      : FileFinch
#   file         : strategies_filefinch.py
#   file_relpath : tests/strategies_filefinch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating plausible and implausible file contents.

The strategies mix genuine signatures (from `tests.samples`) with arbitrary
filler so property tests exercise the boundaries between rules, not just random
noise.
"""

from __future__ import annotations

from hypothesis import strategies as st

from tests import samples

# Leading bytes that let an earlier rule claim the input before the Parquet footer rule
_PREEMPTING_PREFIXES: tuple[bytes, ...] = (
    samples.PNG_MAGIC,
    b"ARROW1",
    b"\xff\xff\xff\xff",
)

s_signature_sample: st.SearchStrategy[bytes] = st.sampled_from(
    [
        samples.png(),
        samples.arrow_file(),
        samples.arrow_stream(),
        samples.parquet(),
        samples.geopackage(),
        samples.sqlite(),
        samples.shapefile(),
        samples.xls(),
        samples.xlsx(),
        samples.zipped_shapefile(),
        samples.plain_zip(),
        samples.geojson(),
        samples.csv(),
    ]
)

s_noise: st.SearchStrategy[bytes] = st.binary(max_size=2048)

s_field: st.SearchStrategy[str] = st.from_regex(r"[A-Za-z0-9_.]{1,8}", fullmatch=True)


@st.composite
def s_csv_text(draw: st.DrawFn) -> bytes:
    """A header plus rows, all with the same number (at least 2) of fields."""
    width: int = draw(st.integers(min_value=2, max_value=6))
    row = st.lists(s_field, min_size=width, max_size=width)
    rows: list[list[str]] = draw(st.lists(row, min_size=1, max_size=8))
    newline: str = draw(st.sampled_from(["\n", "\r\n"]))
    return (newline.join(",".join(r) for r in rows) + newline).encode()


@st.composite
def s_any_payload(draw: st.DrawFn) -> bytes:
    """Noise, a real signature, or a signature followed by noise."""
    kind: int = draw(st.integers(min_value=0, max_value=2))
    if kind == 0:
        return draw(s_noise)
    sample: bytes = draw(s_signature_sample)
    if kind == 1:
        return sample
    return sample + draw(s_noise)


@st.composite
def s_parquet_like(draw: st.DrawFn) -> bytes:
    """Arbitrary bytes ending in the Parquet footer, without a preempting prefix."""
    prefix: bytes = draw(s_noise)
    payload: bytes = prefix + b"PAR1"
    for signature in _PREEMPTING_PREFIXES:
        if payload.startswith(signature):
            payload = b"\x00" + payload
    return payload
