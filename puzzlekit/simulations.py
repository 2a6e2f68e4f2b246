"""Time simulations: a helpdesk with breaks and a leaking bathtub."""

from dataclasses import dataclass

_BREAK_LENGTH = 10


@dataclass
class _Counter:
    efficiency: float
    visitors: int = 0
    breaks: int = 0
    total_time: float = 0.0
    since_break: float = 0.0


class Helpdesk:
    """Counters serving visitors and taking a break after working long enough."""

    def __init__(self, worktime, efficiencies):
        efficiencies = list(efficiencies)
        if not efficiencies:
            raise ValueError("the helpdesk needs at least one counter")
        if any(efficiency <= 0 for efficiency in efficiencies):
            raise ValueError("efficiencies must be positive")
        self.worktime = worktime
        self._counters = [_Counter(float(efficiency)) for efficiency in efficiencies]

    def _precedes(self, first, second):
        if first.total_time == second.total_time and (
            first.since_break >= self.worktime or second.since_break >= self.worktime
        ):
            return first.since_break < second.since_break
        return first.total_time < second.total_time

    def _first_available(self):
        best_index = 0
        for index, counter in enumerate(self._counters):
            if self._precedes(counter, self._counters[best_index]):
                best_index = index
        return best_index

    def serve(self, help_time):
        """Serve one visitor and return the index of the counter that did."""
        while True:
            index = self._first_available()
            counter = self._counters[index]
            if counter.since_break >= self.worktime:
                counter.since_break = 0.0
                counter.total_time += _BREAK_LENGTH
                counter.breaks += 1
                continue
            counter.visitors += 1
            spent = help_time / counter.efficiency
            counter.since_break += spent
            counter.total_time += spent
            return index

    @property
    def visitors(self):
        return [counter.visitors for counter in self._counters]

    @property
    def breaks(self):
        return [counter.breaks for counter in self._counters]


def helpdesk_summary(worktime, efficiencies, help_times):
    """Visitors and breaks per counter after serving everyone in order."""
    desk = Helpdesk(worktime, efficiencies)
    for help_time in help_times:
        desk.serve(help_time)
    return desk.visitors, desk.breaks


def bathtub_fill_time(surface, height, flow, leaks):
    """'HH:MM:SS' to fill the tub, or 'Impossible, <h> cm.' if leaks win."""
    stages = sorted([*(tuple(leak) for leak in leaks), (height, 0)])
    level = 0
    seconds = 0.0
    for leak_height, leak_flow in stages:
        if leak_height > level and flow > 0:
            volume = surface * (leak_height - level)
            seconds += volume * 60.0 / 1000 / flow
        level = leak_height
        flow -= leak_flow
        if flow <= 0:
            return f"Impossible, {level} cm."

    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"