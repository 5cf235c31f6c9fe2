import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from kubewait.errors import ConfigError


@dataclass(frozen=True)
class SelectorQuery:
    namespace: str = ""
    label_selector: str = ""


@dataclass(frozen=True)
class WaitConfig:
    interval: float
    deadline: Optional[float] = None
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.interval <= 0:
            raise ConfigError(f"interval must be positive, got {self.interval}")

    @classmethod
    def from_timeout(cls, interval: float, timeout: Optional[float] = None) -> "WaitConfig":
        """Build a config whose deadline is ``timeout`` seconds from now (0/None = no deadline)."""
        if not timeout:
            return cls(interval=interval)
        return cls(interval=interval, deadline=time.monotonic() + timeout, timeout=timeout)

    def remaining(self) -> Optional[float]:
        if self.deadline is None:
            return None
        return max(self.deadline - time.monotonic(), 0.0)

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline


@dataclass
class ReadinessVerdict:
    ready: bool
    items: Dict[str, bool] = field(default_factory=dict)

    @property
    def not_ready(self):
        return [name for name, ok in self.items.items() if not ok]
