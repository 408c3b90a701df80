"""Graphviz dot export of a state machine's transition table."""

from typing import TYPE_CHECKING, Iterable

from ..core.transitions import Transition
from ..log import get_logger

if TYPE_CHECKING:
    from ..core.state_machine import StateMachine

DOT_SUFFIX = ".dot"

_HEADER = """digraph FSM {
\trankdir=LR
\tsize="100"
\tnode[width=1 fixedsize=false shape=ellipse style=filled fillcolor="skyblue"]
"""

_log = get_logger("Graph")


def _quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(transitions: Iterable[Transition]) -> str:
    """
    Render transitions as a dot digraph, one labelled edge per transition in
    iteration order.
    """
    lines = [
        f"\t{_quote(t.source)} -> {_quote(t.target)} [label={_quote(t.event)}]" for t in transitions
    ]
    return _HEADER + "\n".join(lines) + "\n}\n"


def export_dot(fsm: "StateMachine", outfile: str) -> str:
    """
    Write ``fsm``'s transition table to ``outfile`` as dot text, appending the
    ``.dot`` suffix when missing. Errors from the filesystem propagate as-is.

    :return: The path that was written.
    """
    if not outfile.endswith(DOT_SUFFIX):
        outfile = outfile + DOT_SUFFIX

    with open(outfile, "w", encoding="utf-8") as f:
        f.write(to_dot(fsm.transitions))

    _log.info('Output the FSM to "%s"', outfile)
    return outfile
