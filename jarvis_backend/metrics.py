"""Helpers for sampling host CPU and memory metrics."""
from __future__ import annotations

import datetime as dt
import logging
import threading
from dataclasses import dataclass
from typing import Optional, Protocol

import psutil

from .schemas import SystemMetrics

BYTES_PER_GB = 1024 ** 3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostSample:
    """A single point-in-time read of CPU and memory counters."""

    cpu_usage_percent: float
    memory_total_bytes: int
    memory_used_bytes: int
    memory_available_bytes: int
    cpu_core_count: int


class Sampler(Protocol):
    def sample(self) -> HostSample:
        ...


class PsutilSampler:
    """Reads host counters through psutil.

    CPU usage is psutil's non-blocking reading: utilisation since the previous
    call, tracked in psutil's process-wide baseline. Requests arriving back to
    back therefore cover a very short window and may report close to 0.0. The
    lock keeps concurrent threadpool calls from racing on that baseline.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # The first non-blocking call only sets the baseline and returns 0.0.
        psutil.cpu_percent(interval=None)

    def sample(self) -> HostSample:
        with self._lock:
            cpu_usage = psutil.cpu_percent(interval=None)
        memory = psutil.virtual_memory()
        return HostSample(
            cpu_usage_percent=cpu_usage,
            memory_total_bytes=memory.total,
            memory_used_bytes=memory.used,
            memory_available_bytes=memory.available,
            cpu_core_count=psutil.cpu_count(logical=True) or 0,
        )


def _to_gb(value: int) -> float:
    return value / BYTES_PER_GB


def _usage_percent(used: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return used / total * 100


def build_system_metrics(sample: HostSample, now: Optional[dt.datetime] = None) -> SystemMetrics:
    """Convert a raw sample into the response model, stamping it with ``now``.

    A naive ``now`` is taken as local time; the stamp is always rendered in UTC.
    """
    total = max(0, int(sample.memory_total_bytes))
    used = max(0, int(sample.memory_used_bytes))
    available = max(0, int(sample.memory_available_bytes))
    if total == 0:
        logger.warning("Host reported zero total memory; usage percent forced to 0")

    timestamp = (now or dt.datetime.now(dt.timezone.utc)).astimezone(dt.timezone.utc)
    return SystemMetrics(
        memory_total_bytes=total,
        memory_used_bytes=used,
        memory_available_bytes=available,
        memory_total_gb=_to_gb(total),
        memory_used_gb=_to_gb(used),
        memory_available_gb=_to_gb(available),
        memory_usage_percent=_usage_percent(used, total),
        cpu_usage=float(sample.cpu_usage_percent),
        cpu_count=max(0, int(sample.cpu_core_count)),
        timestamp=timestamp.isoformat(),
    )


def collect_system_metrics(sampler: Sampler) -> SystemMetrics:
    """Take one sample from ``sampler`` and format it."""
    return build_system_metrics(sampler.sample())
