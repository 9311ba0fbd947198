from abc import ABC, abstractmethod


class ClockInterface(ABC):
    @abstractmethod
    def current_tick(self) -> int:
        """
        Returns the current tick. Ticks only grow, and the host calls on_tick exactly
        once for every tick.
        """
        pass
