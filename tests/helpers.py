from tetris_engine import TetrisEngine


class ScriptedRandom:
    """Hands out kinds from a fixed list, then repeats the last one."""
    def __init__(self, *kinds):
        self.kinds = list(kinds)

    def next_piece(self):
        if len(self.kinds) > 1:
            return self.kinds.pop(0)
        return self.kinds[0]


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def make_engine(*kinds, clock=None):
    return TetrisEngine(ScriptedRandom(*(kinds or ("O",))), clock=clock or FakeClock())
