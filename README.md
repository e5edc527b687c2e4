# kvclient

Client-side building blocks for talking to a distributed, transactional
key-value store. The package needs nothing beyond the standard library.

## What is in it

- `kvclient.key`: `Key` wraps arbitrary bytes (no UTF-8 requirement) and
  orders bytewise; `Bound` and `BoundKind` describe one end of a range;
  `hex_repr` gives the upper-case hex form used when printing keys. `Value` is
  plain `bytes`.
- `kvclient.kvpair`: `KvPair` couples a key with a value. It unpacks like a
  tuple and converts with `from_tuple` / `as_tuple`.
- `kvclient.bound_range`: `BoundRange` expresses half-open, inclusive and
  unbounded key ranges and lowers them to scan keys (`to_keys`) or to the wire
  form `KeyRange` (`to_key_range`).
- `kvclient.codec`: `encode_bytes` / `decode_bytes` implement the
  memcomparable encoding, ascending or descending; `max_encoded_bytes_size`
  gives the largest encoded size; malformed input raises `CodecError`.
- `kvclient.backoff`: `Backoff` computes retry delays (none, plain exponential,
  full jitter, equal jitter, decorrelated jitter). `default_region_backoff`,
  `optimistic_backoff` and `pessimistic_backoff` return the preset policies.
- `kvclient.retry`: `retry` awaits a request until it succeeds, reconnecting
  between attempts; `Reconnector` rate-limits reconnects; `RetryError` is
  raised when every attempt failed.
- `kvclient.streams`: `stream_fn` builds an async iterator from a
  state-transition coroutine.
- `kvclient.config`: `Config` carries TLS file paths and the request timeout.
- `kvclient.kvstore`: `KvStore` is a thread-safe in-memory raw key-value store.
- `kvclient.cli`: `parse_args` reads the endpoint and TLS options shared by
  command-line tools; `CommandArgs.config()` turns them into a `Config`.

## Keys and ranges

```python
from kvclient.key import Key
from kvclient.bound_range import BoundRange

start, end = BoundRange.range(b"a", b"z").to_keys()
# start == Key(b"a"), end == Key(b"z")

start, end = BoundRange.inclusive(b"a", b"z").to_keys()
# an inclusive end is expressed by appending a zero byte: end == Key(b"z\x00")

start, end = BoundRange.range_from(b"a").to_keys()
# end is None: the range is open on the right
```

The empty key is the smallest key, so a range that is unbounded below starts at
the empty key. An empty key used as the upper end counts as unbounded in
`end_bound()`. `BoundRange.from_keys` goes the other way: a trailing zero byte
on a scan key flips that bound between inclusive and exclusive.

## Memcomparable encoding

```python
from kvclient.codec import encode_bytes, decode_bytes

encoded = encode_bytes(b"\x01\x02\x03", False)
assert decode_bytes(encoded, False) == b"\x01\x02\x03"
```

`Key.to_encoded()` returns the ascending encoding of a key as a new `Key`.

## Backoff

```python
from kvclient.backoff import Backoff

backoff = Backoff.no_jitter_backoff(2, 7, 3)
backoff.next_delay_duration()  # timedelta of 2 ms
backoff.next_delay_duration()  # 4 ms
backoff.next_delay_duration()  # capped at 7 ms
backoff.next_delay_duration()  # None: attempts used up
```

`full_jitter_backoff` and `decorrelated_jitter_backoff` raise `ValueError` for
non-positive delays; `equal_jitter_backoff` requires delays greater than 1.

## Retry

```python
from kvclient.retry import retry

result = await retry(send_request, reconnector.reconnect)
```

Up to ten attempts are made. After each failure the reconnect callable is
awaited; if it fails five times in a row its error is raised. When all
attempts fail, `RetryError` is raised with the last error attached.

## Configuration

```python
from kvclient.config import Config

config = Config().with_security("root.ca", "internal.cert", "internal.key")
```

`Config` is immutable; `with_security` and `with_timeout` return copies.
`to_dict` and `from_dict` convert to and from plain mappings with kebab-case
keys and the timeout as `{"secs": ..., "nanos": ...}`; missing keys take their
defaults. The default request timeout is two seconds.

## Command-line options

`parse_args(app_name, argv)` understands `--pd` (aliases `--pd-endpoint`,
`--pd-endpoints`; comma-separated endpoints, default `localhost:2379`) and the
TLS options `--ca`, `--cert` and `--key` (alias `--private-key`), each of which
requires the next, so the three must be given together. Invalid input exits
with a usage error.

## What it does not do

The package does not connect to a cluster. It has no network client, no
placement-driver lookups, no transactions and no command-line program of its
own; `KvStore` keeps data in memory only and does not persist it.

## Running the tests

Install the `test` extra and run pytest from the project directory.