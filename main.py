"""
Bonsai - ASCII tree generator

Grows a procedurally generated bonsai in the terminal.

Run modes:
1. Print - grow the tree off-screen and print it (no curses)
2. Static - show the finished tree until a key is pressed
3. Live - animate growth step by step
4. Infinite - keep growing new trees, 'q' quits (any key in screensaver mode)

A tree can be saved (seed + branch count) and loaded later; loading replays
the seed and resumes the animation where the saved tree left off.
"""

import argparse
import curses
import shutil
import time

from bonsai import (
    BaseType,
    GrowthCounters,
    GrowthParameters,
    GridCanvas,
    RandomSource,
    RunConfig,
    base_size,
    draw_base,
    draw_message,
    grow_tree,
    load_state,
    save_state,
)

BASES = {"none": BaseType.NONE, "big": BaseType.BIG, "small": BaseType.SMALL}


def parse_args(argv: list[str] | None = None) -> tuple[RunConfig, GrowthParameters]:
    ap = argparse.ArgumentParser(description="Grow a bonsai tree in the terminal.")
    ap.add_argument("-l", "--live", action="store_true", help="Live mode: show each step of growth.")
    ap.add_argument("-t", "--time", type=float, default=0.03, help="Seconds between steps in live mode.")
    ap.add_argument("-i", "--infinite", action="store_true", help="Infinite mode: keep growing trees.")
    ap.add_argument("-w", "--wait", type=float, default=4.0, help="Seconds between trees in infinite mode.")
    ap.add_argument("-S", "--screensaver", action="store_true", help="Screensaver mode: live + infinite, any key quits.")
    ap.add_argument("-m", "--message", default="", help="Attach a message next to the tree.")
    ap.add_argument("-b", "--base", choices=sorted(BASES), default="big", help="Pot under the tree.")
    ap.add_argument("-c", "--leaf", default="&", help="Comma-separated list of leaf strings.")
    ap.add_argument("-M", "--multiplier", type=int, default=5, help="Branch multiplier; higher means more branching.")
    ap.add_argument("-L", "--life", type=int, default=32, help="Life of the trunk; higher means a bigger tree.")
    ap.add_argument("-p", "--print", dest="print_tree", action="store_true", help="Print the tree to the terminal when finished.")
    ap.add_argument("-s", "--seed", type=int, default=None, help="Seed for the random source.")
    ap.add_argument("-W", "--save", default=None, help="Save progress to this file.")
    ap.add_argument("-C", "--load", default=None, help="Load progress from this file.")
    ap.add_argument("-o", "--image", default=None, help="Also save the finished tree as an image.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Show growth diagnostics on screen.")
    args = ap.parse_args(argv)

    try:
        config = RunConfig(
            live=args.live,
            time_step=args.time,
            infinite=args.infinite,
            time_wait=args.wait,
            screensaver=args.screensaver,
            print_tree=args.print_tree,
            base=BASES[args.base],
            message=args.message,
            seed=args.seed,
            save_path=args.save,
            load_path=args.load,
            image_path=args.image,
        )
        params = GrowthParameters.from_leaf_string(
            args.leaf,
            life_start=args.life,
            multiplier=args.multiplier,
            verbose=args.verbose,
        )
    except ValueError as exc:
        ap.error(str(exc))
    return config, params


def grow_offscreen(config: RunConfig, params: GrowthParameters, rng: RandomSource) -> tuple[GridCanvas, GrowthCounters]:
    """Grow one tree into a terminal-sized grid with the pot and message."""
    cols, rows = shutil.get_terminal_size()
    screen = GridCanvas(cols, rows)
    base_width, base_height = base_size(config.base)

    draw_base(screen.region(cols // 2 - base_width // 2, rows - base_height, base_width, base_height), config.base)
    counters = grow_tree(screen.region(0, 0, cols, rows - base_height), params, rng)
    draw_message(screen, config.message)
    return screen, counters


def run_terminal(
    stdscr: "curses.window",
    config: RunConfig,
    params: GrowthParameters,
    rng: RandomSource,
    skip_until_branch: int,
) -> tuple[GridCanvas, GrowthCounters]:
    """Interactive loop; returns the last tree's mirror grid and counters."""
    # Imported here so the print path never touches curses
    from bonsai.terminal import TerminalSession

    session = TerminalSession(stdscr, base=config.base, message=config.message)
    counters = GrowthCounters()

    while True:
        canvas = session.new_tree()
        grow_tree(canvas, params, rng, counters, animation=config.animation(skip_until_branch))
        session.redraw_message()
        # Only the first tree resumes a loaded save
        skip_until_branch = 0

        if config.save_path:
            save_state(config.save_path, rng.seed, counters.branches)

        if not config.infinite:
            break
        if session.wait_for_key(config.time_wait, config.screensaver):
            break

    if not config.infinite and not config.print_tree:
        session.wait_forever()
    return session.screen, counters


def main(argv: list[str] | None = None) -> None:
    config, params = parse_args(argv)

    seed = config.seed if config.seed is not None else int(time.time())
    skip_until_branch = 0
    if config.load_path:
        state = load_state(config.load_path)
        seed = state.seed
        skip_until_branch = state.branches

    rng = RandomSource(seed)

    if config.print_tree and not config.live and not config.infinite:
        screen, counters = grow_offscreen(config, params, rng)
        if config.save_path:
            save_state(config.save_path, seed, counters.branches)
    else:
        screen, counters = curses.wrapper(run_terminal, config, params, rng, skip_until_branch)

    if config.print_tree:
        print(screen.to_ansi())

    if config.image_path:
        from bonsai.render import save_canvas

        save_canvas(config.image_path, screen)

    if params.verbose:
        print(f"seed: {seed}, branches: {counters.branches}, shoots: {counters.shoots}")


if __name__ == "__main__":
    main()
