"""LaTeX exports: TikZ pictures, formal definitions and omega-words."""

import re
from typing import Dict, List, Optional

from buchicheck.automaton.buchi import BuchiAutomaton, Transition
from buchicheck.export.layout import GraphEdge, GraphNode, layout_circular

_OMEGA_SUFFIX = re.compile(r"\^(w|ω)")


def word_to_latex(word: str) -> str:
    """Render an omega-word for math mode; the empty word becomes ε."""
    if not word:
        return r"\varepsilon"
    return _OMEGA_SUFFIX.sub(r"^{\\omega}", word)


def build_tikz_export(
    automaton: BuchiAutomaton,
    nodes: Optional[List[GraphNode]] = None,
    edges: Optional[List[GraphEdge]] = None,
    scale: float = 0.06,
    max_width_cm: float = 10,
) -> str:
    """TikZ picture of the automaton preceded by its formal definition.

    Without explicit nodes and edges a circular layout is used. Layout
    coordinates are scaled down so the picture is at most ``max_width_cm``
    wide.

    Args:
        automaton: The automaton to draw.
        nodes: Positioned states.
        edges: Transitions to draw.
        scale: Layout units to centimetres.
        max_width_cm: Width cap of the picture.

    Returns:
        LaTeX source (requires the tikz package).
    """
    if nodes is None or edges is None:
        nodes, edges = layout_circular(automaton)

    width = 0.0
    if nodes:
        xs = [n.x for n in nodes]
        width = (max(xs) - min(xs)) * scale
    if width > max_width_cm:
        scale = max_width_cm / width * scale

    lines = [
        "% TikZ export for Büchi automaton",
        r"% Requires: \usepackage{tikz}",
        r"% Optional: \usetikzlibrary{arrows.meta,positioning}",
        r"\begin{tikzpicture}[>=Stealth, node distance=2cm]",
    ]

    for n in nodes:
        double = ",double" if n.is_accepting else ""
        lines.append(
            f"  \\node[circle,draw,minimum size=10mm{double}] ({n.id}) "
            f"at ({n.x * scale:.2f},{-n.y * scale:.2f}) {{{n.label}}};"
        )

    for n in nodes:
        if n.is_initial:
            lines.append(
                f"  \\draw[->] ({n.x * scale - 1:.2f},{-n.y * scale:.2f}) -- ({n.id});"
            )
            break

    for e in edges:
        if e.source == e.target:
            lines.append(
                f"  \\draw[->] ({e.source}) .. controls +(0.8,0.8) and +(-0.8,0.8) "
                f".. node[above]{{{e.label}}} ({e.target});"
            )
        else:
            lines.append(
                f"  \\draw[->] ({e.source}) -- node[sloped,above]{{{e.label}}} "
                f"({e.target});"
            )

    lines.append(r"\end{tikzpicture}")

    delta = "; ".join(f"({t.source}, {t.symbol}, {t.target})" for t in automaton.transitions)
    formal = [
        "% Formal definition:",
        f"% Q = \\{{{', '.join(automaton.states)}\\}}",
        f"% \\Sigma = \\{{{', '.join(automaton.alphabet)}\\}}",
        f"% q_0 = {automaton.initial}",
        f"% F = \\{{{', '.join(automaton.accepting)}\\}}",
        f"% \\Delta = \\{{{delta}\\}}",
    ]
    return "\n".join(formal) + "\n\n" + "\n".join(lines)


def build_formal_definition_latex(automaton: BuchiAutomaton) -> str:
    """The automaton as an amsmath tuple plus its transition function by state."""
    by_state: Dict[str, List[Transition]] = {}
    for t in automaton.transitions:
        by_state.setdefault(t.source, []).append(t)

    lines = [
        "% Formal (non-TikZ) definition for a deterministic Büchi automaton",
        r"% Requires: \usepackage{amsmath}",
        r"\begin{align*}",
        r"\mathcal{A} &= (Q, \Sigma, q_0, \delta, F) \\",
        f"Q &= \\{{{', '.join(automaton.states)}\\}} \\\\",
        f"\\Sigma &= \\{{{', '.join(automaton.alphabet)}\\}} \\\\",
        f"q_0 &= {automaton.initial} \\\\",
        f"F &= \\{{{', '.join(automaton.accepting)}\\}} \\\\",
        r"\end{align*}",
    ]

    if by_state:
        lines.extend(["", "% Transition function by origin state", r"\[ \begin{array}{rcl}"])
        sources = list(by_state)
        for i, source in enumerate(sources):
            entries = r"; \; ".join(
                f"{t.symbol} \\mapsto {t.target}" for t in by_state[source]
            )
            ending = "" if i == len(sources) - 1 else r" \\"
            lines.append(f"  {source} &\\mapsto& \\{{{entries}\\}}{ending}")
        lines.append(r"\end{array} \]")

    return "\n".join(lines)
