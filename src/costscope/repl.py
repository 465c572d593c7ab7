import enum
from typing import Callable

import structlog

from costscope.dataset import Dataset
from costscope.metrics import LoadMetrics
from costscope.models import UsageRecord

logger = structlog.get_logger()

DEFAULT_TOP_N = 10

BANNER = "Welcome to costscope, a cost and usage data explorer!\n"
MENU = (
    "Using one of the following keywords:\n"
    " - applications\n"
    " - resources\n"
    " - cost\n"
    " - consumed quantity"
)
PROMPT = (
    "\nPlease enter the data you would like to view, "
    "or enter 'exit' when finished:..."
)
CLOSING_MESSAGE = "Application is now closing"
NOT_RECOGNIZED = "Command not recognized"


class State(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


def _render_ranking(
    header: "str",
    records: "list[UsageRecord]",
    value: "Callable[[UsageRecord], float]",
) -> "list[str]":
    return [header] + [f"{r.resource_group}: {value(r)}" for r in records]


def _render_listing(header: "str", names: "tuple[str, ...]", noun: "str") -> "list[str]":
    return [header, *names, "", f"Total number of {noun}: {len(names)}"]


def dispatch(
    state: "State",
    line: "str",
    dataset: "Dataset",
    top_n: "int" = DEFAULT_TOP_N,
) -> "tuple[State, list[str]]":
    """
    maps one line of input to the next state and the lines to print.
    Matching is exact and case-sensitive; unknown input is reported
    as ordinary output and never raises.
    """
    if state is State.TERMINATED:
        return state, []

    if line == "cost":
        return state, _render_ranking(
            f"The top {top_n} highest costing entries and corresponding applications:",
            dataset.top_by_cost(top_n),
            lambda r: r.cost,
        )
    if line == "consumed quantity":
        return state, _render_ranking(
            f"The top {top_n} highest consuming entries and corresponding applications:",
            dataset.top_by_consumed_quantity(top_n),
            lambda r: r.consumed_quantity,
        )
    if line == "applications":
        listing = dataset.list_applications()
        return state, _render_listing("Applications list:", listing.names, "applications")
    if line == "resources":
        listing = dataset.list_resources()
        return state, _render_listing("Resources list:", listing.names, "resources")
    if line == "exit":
        return State.TERMINATED, [CLOSING_MESSAGE]

    return state, [NOT_RECOGNIZED]


def run(
    dataset: "Dataset",
    read_line: "Callable[[], str]" = input,
    write: "Callable[[str], None]" = print,
    top_n: "int" = DEFAULT_TOP_N,
    metrics: "LoadMetrics | None" = None,
) -> "int":
    """
    runs the interactive loop until the exit command or end of
    input. Returns the number of commands processed.
    """
    write(BANNER)
    write(MENU)

    state = State.RUNNING
    commands = 0
    while state is State.RUNNING:
        write(PROMPT)
        typed = True
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            # closed stdin or ctrl-c behaves like "exit"
            line = "exit"
            typed = False

        if typed:
            write(f"Entered: {line}...\n")

        state, output = dispatch(state, line, dataset, top_n)
        commands += 1
        logger.debug(
            "command_dispatched", command=line, typed=typed, state=state.value
        )
        # only count what the operator actually entered
        if metrics is not None and typed:
            metrics.inc_command(line)

        for out in output:
            write(out)

    logger.info("query_loop_finished", commands=commands)
    return commands
