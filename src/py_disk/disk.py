"""Disk scheduling algorithms — ordering track requests to reduce seek distance.

When several requests are waiting for the disk, the head has to travel
between tracks (cylinders) to service them.  The dominant cost is
**head movement** — how far the arm travels.  A disk scheduling
algorithm decides the *order* in which pending requests are visited.

Think of the disk head like an elevator in a building:
    - **FCFS** — stop at every floor in the order buttons were pressed.
    - **SCAN** — ride to the end in one direction, then come back.
    - **C-SCAN** — ride up to the top, drop straight to the bottom, ride
      up again.

Algorithms:
    - ``FCFSPolicy`` — simple and fair, but the head zigzags.
    - ``SCANPolicy`` — predictable sweep; touches the boundary in the
      starting direction before reversing.
    - ``CSCANPolicy`` — always sweeps upward; the idle return from the
      top to track 0 still counts as movement.

All policies implement the ``DiskPolicy`` protocol (Strategy pattern)
and return a ``ScheduleResult``: the visit order plus the total head
movement, starting from the initial head position.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

DEFAULT_MAX_REQUESTS = 50


class Direction(IntEnum):
    """Initial sweep direction for SCAN.

    The integer values match the console input: 0 sweeps toward
    track 0, 1 sweeps toward the last track.
    """

    DOWN = 0
    UP = 1


class DiskRequestError(ValueError):
    """Raise when a workload cannot be scheduled.

    Examples: a position outside the disk, a head beyond the last
    track, or more requests than the configured maximum.
    """


@dataclass(frozen=True)
class ScheduleResult:
    """The outcome of one scheduling run.

    Attributes:
        algorithm: Display name of the policy that produced the run.
        head: Where the head started.
        order: Positions visited, boundaries included.
        total_movement: Tracks travelled, idle jumps included.

    """

    algorithm: str
    head: int
    order: tuple[int, ...]
    total_movement: int


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    name: str

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return the visit order and head movement for *requests*.

        Args:
            requests: Track numbers to visit, in arrival order.
            head: Current position of the disk head.

        Returns:
            The visit order and its total head movement.

        """
        ...


def sort_ascending(values: Iterable[int]) -> list[int]:
    """Return *values* as a new list in non-decreasing order."""
    return sorted(values)


def total_movement(order: Iterable[int], *, head: int) -> int:
    """Return the distance travelled visiting *order* from *head*."""
    total = 0
    current = head
    for pos in order:
        total += abs(pos - current)
        current = pos
    return total


def check_position(position: int, *, disk_size: int, what: str = "request") -> None:
    """Reject *position* unless it lies in ``[0, disk_size)``.

    Raises:
        DiskRequestError: If the position is off the disk.

    """
    if not 0 <= position < disk_size:
        msg = f"{what} {position} is outside the disk (0..{disk_size - 1})"
        raise DiskRequestError(msg)


def check_disk_size(disk_size: int) -> None:
    """Reject a disk with no tracks.

    Raises:
        DiskRequestError: If *disk_size* is below 1.

    """
    if disk_size < 1:
        msg = f"disk size must be at least 1, got {disk_size}"
        raise DiskRequestError(msg)


class _HeadTrace:
    """Track the head while a policy walks it across the disk."""

    def __init__(self, head: int) -> None:
        self.position = head
        self.visited: list[int] = []
        self.movement = 0

    def visit(self, track: int) -> None:
        self.movement += abs(self.position - track)
        self.position = track
        self.visited.append(track)

    def jump(self, track: int) -> None:
        # Travel without servicing anything on the way.
        self.movement += abs(self.position - track)
        self.position = track


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing high total head movement.

    Real-world analogy: an elevator that visits floors in the order
    buttons were pressed, regardless of direction.
    """

    name = "FCFS"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Visit requests in their original order."""
        trace = _HeadTrace(head)
        for track in requests:
            trace.visit(track)
        return ScheduleResult(
            algorithm=self.name,
            head=head,
            order=tuple(trace.visited),
            total_movement=trace.movement,
        )


class _SweepPolicy:
    """Shared partitioning for the sweeping policies.

    Args:
        disk_size: Number of tracks; the last one is ``disk_size - 1``.

    """

    name = ""

    def __init__(self, *, disk_size: int = 200) -> None:
        """Create a sweeping policy for a disk of *disk_size* tracks."""
        check_disk_size(disk_size)
        self._disk_size = disk_size

    @property
    def disk_size(self) -> int:
        """Return the number of tracks on the disk."""
        return self._disk_size

    @property
    def last_track(self) -> int:
        """Return the highest track number."""
        return self._disk_size - 1

    def _partition(self, requests: Sequence[int], head: int) -> tuple[list[int], list[int]]:
        """Split requests into those below the head and the rest."""
        check_position(head, disk_size=self._disk_size, what="head")
        for track in requests:
            check_position(track, disk_size=self._disk_size)
        left = [r for r in requests if r < head]
        right = [r for r in requests if r >= head]
        return left, right

    def _result(self, trace: _HeadTrace, head: int) -> ScheduleResult:
        return ScheduleResult(
            algorithm=self.name,
            head=head,
            order=tuple(trace.visited),
            total_movement=trace.movement,
        )


class SCANPolicy(_SweepPolicy):
    """SCAN (Elevator algorithm) — sweep one direction, then reverse.

    The arm moves in the starting direction, servicing every request on
    the way and touching the boundary at that end, then reverses and
    services the rest.  Only the boundary in the starting direction is
    visited: after reversing, the arm stops at the last request.

    Args:
        direction: Initial sweep direction.
        disk_size: Number of tracks on the disk.

    """

    name = "SCAN"

    def __init__(self, *, direction: Direction = Direction.UP, disk_size: int = 200) -> None:
        """Create a SCAN policy with an initial direction."""
        super().__init__(disk_size=disk_size)
        self._direction = Direction(direction)

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Visit requests in SCAN (elevator) order."""
        trace = _HeadTrace(head)
        if not requests:
            return self._result(trace, head)

        left, right = self._partition(requests, head)
        if self._direction is Direction.DOWN:
            left.append(0)
        else:
            right.append(self.last_track)
        left = sort_ascending(left)
        right = sort_ascending(right)

        if self._direction is Direction.DOWN:
            legs = (reversed(left), right)
        else:
            legs = (right, reversed(left))
        for leg in legs:
            for track in leg:
                trace.visit(track)
        return self._result(trace, head)


class CSCANPolicy(_SweepPolicy):
    """Circular SCAN — sweep up, jump back to track 0, sweep up again.

    Unlike SCAN, C-SCAN only services requests while moving upward.
    After reaching the last track the arm returns to track 0 without
    servicing anything, then continues upward.  Both ends of the disk
    are always visited, and the return trip counts toward movement.

    With regular SCAN, requests in the middle of the disk are favoured
    (the arm passes them twice per cycle).  C-SCAN eliminates this bias.

    Args:
        disk_size: Number of tracks on the disk.

    """

    name = "C-SCAN"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Visit requests in C-SCAN order."""
        trace = _HeadTrace(head)
        if not requests:
            return self._result(trace, head)

        left, right = self._partition(requests, head)
        left.append(0)
        right.append(self.last_track)

        for track in sort_ascending(right):
            trace.visit(track)
        trace.jump(0)
        for track in sort_ascending(left):
            trace.visit(track)
        return self._result(trace, head)


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue.

    The disk scheduler accepts requests, then runs the selected policy
    to determine the service order.  The queue is bounded by
    *max_requests*; anything beyond it is rejected rather than dropped.
    """

    def __init__(
        self,
        *,
        policy: DiskPolicy,
        head: int = 0,
        max_requests: int = DEFAULT_MAX_REQUESTS,
    ) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        self._policy = policy
        self._head = head
        self._max_requests = max_requests
        self._queue: list[int] = []

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def policy(self) -> DiskPolicy:
        """Return the current scheduling policy."""
        return self._policy

    @policy.setter
    def policy(self, value: DiskPolicy) -> None:
        """Swap the scheduling policy (Strategy pattern)."""
        self._policy = value

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, track: int) -> None:
        """Add a request for a track.

        Raises:
            DiskRequestError: If the track is negative or the queue is full.

        """
        if track < 0:
            msg = f"request {track} is negative"
            raise DiskRequestError(msg)
        if len(self._queue) >= self._max_requests:
            msg = f"too many requests (maximum {self._max_requests})"
            raise DiskRequestError(msg)
        self._queue.append(track)

    def run(self) -> ScheduleResult:
        """Run the scheduling policy on queued requests.

        Moves the head to the last visited track and clears the queue.

        Returns:
            The service order and its head movement.

        """
        result = self._policy.schedule(list(self._queue), head=self._head)
        if result.order:
            self._head = result.order[-1]
        self._queue.clear()
        return result
