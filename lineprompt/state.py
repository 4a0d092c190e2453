import dataclasses


@dataclasses.dataclass
class State:
    debug_logs: bool = False


STATE = State()
