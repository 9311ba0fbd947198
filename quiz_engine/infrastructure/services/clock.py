from quiz_engine.app.domain.services_interfaces.clock import ClockInterface


class ManualClock(ClockInterface):
    def __init__(self, tick: int = 0):
        self.tick = tick

    def current_tick(self) -> int:
        return self.tick

    def advance(self) -> int:
        self.tick += 1
        return self.tick
