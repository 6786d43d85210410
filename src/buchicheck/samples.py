"""Reference automata in the text format."""

from dataclasses import dataclass
from typing import List, Optional

from buchicheck.automaton.buchi import BuchiAutomaton


@dataclass(frozen=True)
class Sample:
    """A named automaton definition.

    Attributes:
        id: Short identifier used on the command line.
        title: Display title.
        language_latex: LaTeX description of the accepted language.
        source: Definition in the text format.
    """

    id: str
    title: str
    source: str
    language_latex: str = ""

    def automaton(self) -> BuchiAutomaton:
        return BuchiAutomaton.from_text(self.source)


SAMPLES: List[Sample] = [
    Sample(
        id="baseline",
        title="Baseline sample",
        language_latex=r"\text{Reference automaton}",
        source="""states: q0,q1,q2
alphabet: a,b
start: q0
accept: q2
transitions:
q0,a->q1
q0,b->q0
q1,a->q2
q1,b->q0
q2,a->q2
q2,b->q0""",
    ),
    Sample(
        id="infinitely-many-b",
        title="Infinitely many b",
        language_latex=(
            r"L = \{ w \in \{a,b\}^{\omega} \mid b \text{ occurs infinitely often} \}"
        ),
        source="""states: q0,q1
alphabet: a,b
start: q0
accept: q1
transitions:
q0,a->q0
q0,b->q1
q1,a->q0
q1,b->q1""",
    ),
    Sample(
        id="pure-b",
        title="Only b forever (b^ω)",
        language_latex=r"L = b^{\omega}",
        source="""states: q0,q_bad
alphabet: a,b
start: q0
accept: q0
transitions:
q0,b->q0
q0,a->q_bad
q_bad,a->q_bad
q_bad,b->q_bad""",
    ),
    Sample(
        id="ab-cycle",
        title="Exact pattern (ab)^ω",
        language_latex=r"L = (ab)^{\omega}",
        source="""states: q0,q1,q_bad
alphabet: a,b
start: q0
accept: q0,q1
transitions:
q0,a->q1
q0,b->q_bad
q1,b->q0
q1,a->q_bad
q_bad,a->q_bad
q_bad,b->q_bad""",
    ),
    Sample(
        id="both-infinitely-often",
        title="a and b infinitely often",
        language_latex=(
            r"L = \{ w \in \{a,b\}^{\omega} \mid a \text{ and } b"
            r" \text{ occur infinitely often} \}"
        ),
        source="""states: q1,q2,q3
alphabet: a,b
start: q1
accept: q1
transitions:
q1,a->q2
q1,b->q3
q2,a->q2
q2,b->q3
q3,a->q1
q3,b->q3""",
    ),
]


def get_sample(sample_id: str) -> Optional[Sample]:
    """Look up a sample by id."""
    for sample in SAMPLES:
        if sample.id == sample_id:
            return sample
    return None
