import pytest


class FixedRng:
    """Deterministic stand-in for random.Random.

    roll: value returned by random() (0.0 => every accuracy check hits)
    uniform_at: position inside [a, b] returned by uniform()
    pick: index returned by choice()
    """
    def __init__(self, roll=0.0, uniform_at=1.0, pick=0):
        self.roll = roll
        self.uniform_at = uniform_at
        self.pick = pick
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.roll

    def uniform(self, a, b):
        self.calls += 1
        return a + (b - a) * self.uniform_at

    def choice(self, seq):
        self.calls += 1
        return seq[self.pick]


def creature(uid, name, *, types=("Normal",), hp=100, attack=50, defense=50, sp_atk=50, sp_def=50,
             speed=50, moves=None):
    return {
        "id": uid,
        "name": name,
        "types": list(types),
        "stats": {"hp": hp, "attack": attack, "defense": defense,
                  "specialAttack": sp_atk, "specialDefense": sp_def, "speed": speed},
        "attacks": moves if moves is not None else [
            {"name": "Tackle", "type": "Normal", "category": "Physical", "power": 40, "accuracy": 100}
        ],
    }


def move(name="Strike", type_="Normal", category="Physical", power=40, accuracy=100):
    return {"name": name, "type": type_, "category": category, "power": power, "accuracy": accuracy}


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def make_creature():
    return creature


@pytest.fixture
def make_move():
    return move
