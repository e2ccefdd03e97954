"""Simulation driver — run every planner on the same workload.

A ``Workload`` is the immutable input shared by all planners: the
request sequence, the starting head, the disk size and SCAN's initial
direction.  ``simulate`` validates it once, then gives each planner its
own ``DiskScheduler`` so no head position leaks between runs.
"""

from dataclasses import dataclass

from py_disk.disk import (
    DEFAULT_MAX_REQUESTS,
    CSCANPolicy,
    Direction,
    DiskPolicy,
    DiskRequestError,
    DiskScheduler,
    FCFSPolicy,
    ScheduleResult,
    SCANPolicy,
    check_disk_size,
    check_position,
)
from py_disk.logging import Logger, LogLevel

ALGORITHMS = ("FCFS", "SCAN", "C-SCAN")


@dataclass(frozen=True)
class Workload:
    """The input to one simulation.

    Attributes:
        requests: Track positions in arrival order.
        head: Starting head position.
        disk_size: Number of tracks on the disk.
        direction: Initial sweep direction for SCAN.

    """

    requests: tuple[int, ...]
    head: int
    disk_size: int
    direction: Direction = Direction.UP

    def validate(self, *, max_requests: int = DEFAULT_MAX_REQUESTS) -> None:
        """Check the workload before any planner runs.

        Raises:
            DiskRequestError: On the first invalid value found.

        """
        if len(self.requests) > max_requests:
            msg = f"too many requests: {len(self.requests)} (maximum {max_requests})"
            raise DiskRequestError(msg)
        check_disk_size(self.disk_size)
        check_position(self.head, disk_size=self.disk_size, what="head")
        for track in self.requests:
            check_position(track, disk_size=self.disk_size)
        if self.direction not in tuple(Direction):
            msg = f"direction must be 0 or 1, got {self.direction}"
            raise DiskRequestError(msg)


def build_policies(workload: Workload) -> list[DiskPolicy]:
    """Return one policy per algorithm, configured for *workload*."""
    return [
        FCFSPolicy(),
        SCANPolicy(direction=Direction(workload.direction), disk_size=workload.disk_size),
        CSCANPolicy(disk_size=workload.disk_size),
    ]


def simulate(
    workload: Workload,
    *,
    max_requests: int = DEFAULT_MAX_REQUESTS,
    logger: Logger | None = None,
) -> list[ScheduleResult]:
    """Run FCFS, SCAN and C-SCAN on *workload*, in that order.

    Args:
        workload: The shared input.
        max_requests: Largest request count accepted.
        logger: Where to record the run; a fresh one is used if None.

    Returns:
        One result per algorithm.

    Raises:
        DiskRequestError: If the workload is invalid.  Nothing is run.

    """
    log = logger if logger is not None else Logger()
    try:
        workload.validate(max_requests=max_requests)
    except DiskRequestError as e:
        log.log(LogLevel.ERROR, f"rejected workload: {e}", source="simulator")
        raise

    log.log(
        LogLevel.INFO,
        f"{len(workload.requests)} requests, head {workload.head}, "
        f"disk size {workload.disk_size}, direction {Direction(workload.direction).name}",
        source="simulator",
    )

    results: list[ScheduleResult] = []
    for policy in build_policies(workload):
        scheduler = DiskScheduler(policy=policy, head=workload.head, max_requests=max_requests)
        for track in workload.requests:
            scheduler.add_request(track)
        log.log(LogLevel.DEBUG, f"scheduling {len(scheduler.pending)} requests", source=policy.name)
        result = scheduler.run()
        log.log(
            LogLevel.INFO,
            f"visited {len(result.order)} tracks, total movement {result.total_movement}",
            source=policy.name,
        )
        results.append(result)
    return results
