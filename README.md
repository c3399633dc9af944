# snapproxy

`snapproxy` helps you write a remote snapshotter: a service that a container
runtime loads as a proxy plugin and that creates, mounts, commits and removes
filesystem snapshots.

You implement one asynchronous interface, `Snapshotter`. The package provides
the request and response messages, conversion between wire messages and
native values, and the mapping of errors to status replies.

## Concepts

A snapshot represents a filesystem state. Every snapshot has a parent; the
empty parent is written as the empty string. The kinds of snapshot are listed
in `snapproxy.models.Kind`: `UNKNOWN`, `VIEW`, `ACTIVE` and `COMMITTED`,
valued by their wire numbers 0 to 3.

- `Info` describes a snapshot: kind, name, parent, labels and the times it was
  created and last updated. By default both times are the current UTC time.
- `Usage` reports the inodes and bytes used by a snapshot itself, excluding its
  parents. Usages can be summed in place with `+=`.

## Writing a snapshotter

Subclass `Snapshotter` from `snapproxy.models` and implement its coroutines:

```python
from snapproxy.models import Info, Snapshotter, Usage


class MySnapshotter(Snapshotter):
    async def stat(self, key):
        return Info(name=key)

    async def update(self, info, fieldpaths):
        return info

    async def usage(self, key):
        return Usage()

    async def mounts(self, key):
        return []

    async def prepare(self, key, parent, labels):
        return []

    async def view(self, key, parent, labels):
        return []

    async def commit(self, name, key, labels):
        pass

    async def remove(self, key):
        pass
```

`clear` has a default that does nothing; override it if your snapshotter
defers resource cleanup until after removal. Mounts are passed through to the
caller unchanged, so any value describing a mount may be returned.

## Serving requests

`snapproxy.wrap.server` wraps any snapshotter in a `Wrapper`, which accepts
the request messages from `snapproxy.messages` and returns the matching
responses (`commit`, `remove` and `cleanup` return `None`):

```python
import asyncio

from snapproxy.messages import PrepareSnapshotRequest, UsageRequest
from snapproxy.wrap import server


async def demo():
    service = server(MySnapshotter())
    prepared = await service.prepare(PrepareSnapshotRequest(key="layer-1", parent=""))
    usage = await service.usage(UsageRequest(key="layer-1"))
    print(prepared.mounts, usage.size, usage.inodes)


asyncio.run(demo())
```

When a request cannot be served, the wrapper raises `Status` (from
`snapproxy.status`) carrying a `StatusCode` and a message:

- an exception raised by the snapshotter gives `INTERNAL`, with the
  exception's `repr` as the message (see `snapproxy.wrap.status`);
- an update request without info gives `FAILED_PRECONDITION`;
- an update whose info cannot be converted gives `INVALID_ARGUMENT`;
- listing snapshots is not supported and always gives `UNIMPLEMENTED`.

For an update, the paths of the request's `update_mask` are passed to the
snapshotter as `fieldpaths`, or `None` when there is no mask.

## Conversions

`snapproxy.convert` maps between native values and wire messages:
`kind_to_int` and `kind_from_int` for snapshot kinds, `info_to_message` and
`info_from_message` for snapshot info. An unknown kind number or a time that
cannot be represented raises `ConversionError`, and `conversion_status` turns
such an error into an internal `Status`.

Times travel as `snapproxy.messages.Timestamp` values (seconds and
nanoseconds since the Unix epoch). `Timestamp.from_datetime` treats naive
datetimes as UTC; `Timestamp.to_datetime` returns a UTC datetime truncated to
microseconds. When info arrives without a time, the epoch is used.

## Example

`snapproxy.example.ExampleSnapshotter` is a minimal snapshotter that logs
every call through the standard `logging` module and returns empty results.
It is a handy starting point and a stand-in during integration work.

## What this package does not do

`snapproxy` has no network layer. It does not listen on a socket, does not
encode or decode messages on the wire, and has no command to start a
service. The `Wrapper` works on plain Python message objects; connecting it
to a transport that a container runtime can reach is left to you.