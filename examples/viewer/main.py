"""Haven Viewer: watch both searches solve a puzzle.

Draws the pristine board with the informed route (yellow) and the greedy
route (cyan) on top. Agent positions come from the command line.

Controls:
  Space   Toggle between the pristine board and the board after the last search
  Escape  Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from tick_haven import Algorithm, InvalidLayoutError, Layout, SearchConfig, solve
from ui.constants import COLOR_BG, COLOR_TEXT, FPS, GRID_PX, SCREEN_H, SCREEN_W
from ui.renderer import draw_grid, draw_path


def _coord(text: str) -> tuple[int, int]:
    try:
        x, y = (int(part) for part in text.strip("[]()").split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}")
    return x, y


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Haven Viewer, a tick-haven visual demo")
    p.add_argument("--hazard", type=_coord, default=(2, 2), help="Pursuer-hazard x,y (default: 2,2)")
    p.add_argument("--monster", type=_coord, default=(4, 4), help="Monster x,y (default: 4,4)")
    p.add_argument("--rock", type=_coord, default=(8, 0), help="Rock x,y (default: 8,0)")
    p.add_argument("--goal", type=_coord, default=(0, 8), help="Goal x,y (default: 0,8)")
    p.add_argument("--haven", type=_coord, default=(8, 8), help="Haven x,y (default: 8,8)")
    p.add_argument("--variant", type=int, default=1, choices=(1, 2), help="Perception variant")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    layout = Layout(
        pursuer=(0, 0),
        pursuer_hazard=args.hazard,
        monster=args.monster,
        rock=args.rock,
        goal=args.goal,
        haven=args.haven,
    )
    try:
        layout.validate()
    except InvalidLayoutError as exc:
        print(f"Invalid layout: {exc}", file=sys.stderr)
        sys.exit(2)

    config = SearchConfig(variant=args.variant)
    last_grid = layout.build_grid()
    results = {
        algorithm: solve(last_grid, algorithm, config)
        for algorithm in (Algorithm.INFORMED, Algorithm.GREEDY)
    }
    # last_grid is left as the greedy search finished with it
    grid = layout.build_grid()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Haven Viewer")
    font = pygame.font.SysFont("monospace", 16)
    clock = pygame.time.Clock()
    show_after = False

    running = True
    while running:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    show_after = not show_after

        screen.fill(COLOR_BG)
        draw_grid(screen, last_grid if show_after else grid)
        draw_path(screen, results[Algorithm.INFORMED], offset=-4)
        draw_path(screen, results[Algorithm.GREEDY], offset=4)

        for row, (algorithm, outcome) in enumerate(results.items()):
            verdict = "Win" if outcome.won else "Lose"
            text = (
                f"{algorithm.value:<9} {verdict:<5} steps={outcome.steps:<3} "
                f"{outcome.elapsed * 1000:.2f} ms"
            )
            screen.blit(font.render(text, True, COLOR_TEXT), (8, GRID_PX + 6 + row * 22))

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
