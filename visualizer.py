#Pygame front end for the interactive maze
#Left click moves the start, Ctrl+left click moves the end, right click toggles a wall
#G randomizes, Space/Enter solves (animated), C clears, Esc quits

from __future__ import annotations

import logging

import pygame

from maze_grid import CellState

logger = logging.getLogger(__name__)


class MazeVisualizer:
    #Draws a Grid and forwards user input to it, all maze logic lives in Grid and PathFinder

    def __init__(
        self,
        grid,
        finder,
        wall_probability=0.3,
        cell_size=24,
        stats_height=72,
        steps_per_frame=4,
    ):
        self.grid = grid
        self.finder = finder
        self.wall_probability = wall_probability
        self.cell_size = cell_size
        self.stats_height = stats_height
        self.steps_per_frame = steps_per_frame
        self.search = None
        self.explored = set()
        self.last_snapshot = None

    def pixel_to_cell(self, px, py):
        return px // self.cell_size, py // self.cell_size

    def cell_rect(self, x, y):
        return pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)

    def cell_center(self, x, y):
        half = self.cell_size // 2
        return x * self.cell_size + half, y * self.cell_size + half

    def _stop_search(self):
        self.search = None
        self.explored = set()
        self.last_snapshot = None

    def handle_click(self, button, pos, mods):
        x, y = self.pixel_to_cell(*pos)
        if button == 1:
            if mods & pygame.KMOD_CTRL:
                self.grid.set_end(x, y)
            else:
                self.grid.set_start(x, y)
        elif button == 3:
            self.grid.toggle_wall(x, y)
        else:
            return
        self._stop_search()

    def handle_key(self, key):
        if key == pygame.K_g:
            self.grid.randomize(self.wall_probability)
            self._stop_search()
        elif key == pygame.K_c:
            self.grid.reset()
            self._stop_search()
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self._stop_search()
            self.grid.clear_path()
            self.search = self.finder.steps(self.grid)

    def advance_search(self):
        if self.search is None:
            return
        for _ in range(self.steps_per_frame):
            try:
                snapshot = next(self.search)
            except StopIteration:
                self.search = None
                return
            self.last_snapshot = snapshot
            if snapshot.current is not None:
                self.explored.add(snapshot.current)
            if snapshot.done:
                self.grid.set_path(snapshot.path)
                logger.info("search finished: %s, expanded=%d", snapshot.outcome.value, snapshot.expanded)
                self.search = None
                return

    def run(self):
        rows, cols = self.grid.dimensions()
        width = cols * self.cell_size
        height = rows * self.cell_size

        pygame.init()
        screen = pygame.display.set_mode((width, height + self.stats_height))
        pygame.display.set_caption("Grid Maze A*")
        font = pygame.font.SysFont(None, max(16, int(18 * self.cell_size / 24)))
        clock = pygame.time.Clock()

        #color schemes for visual aspects
        colors = {
            "wall": (20, 20, 20),
            "floor": (235, 235, 235),
            "line": (190, 190, 190),
            "explored": (150, 200, 245),
            "start": (50, 200, 90),
            "end": (210, 60, 60),
            "path": (40, 80, 230),
        }

        running = True
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.handle_click(event.button, event.pos, pygame.key.get_mods())
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            self.advance_search()

            screen.fill((10, 10, 10))
            for y in range(rows):
                for x in range(cols):
                    rect = self.cell_rect(x, y)
                    if self.grid.cell_state(x, y) == CellState.WALL:
                        color = colors["wall"]
                    elif (x, y) in self.explored:
                        color = colors["explored"]
                    else:
                        color = colors["floor"]
                    pygame.draw.rect(screen, color, rect)
                    pygame.draw.rect(screen, colors["line"], rect, 1)

            pygame.draw.rect(screen, colors["start"], self.cell_rect(*self.grid.start_point()))
            pygame.draw.rect(screen, colors["end"], self.cell_rect(*self.grid.end_point()))

            path = self.grid.path
            if len(path) > 1:
                points = [self.cell_center(x, y) for x, y in path]
                pygame.draw.lines(screen, colors["path"], False, points, 3)

            snapshot = self.last_snapshot
            if snapshot is None:
                status = "ready"
            elif not snapshot.done:
                status = "searching"
            else:
                status = snapshot.outcome.value
            lines = [
                f"status: {status}   expanded: {snapshot.expanded if snapshot else 0}   path length: {len(path) if path else '-'}",
                "L-click start | Ctrl+L-click end | R-click wall | G random | Space solve | C clear",
            ]
            stats_rect = pygame.Rect(0, height, width, self.stats_height)
            pygame.draw.rect(screen, (25, 25, 25), stats_rect)
            for i, text in enumerate(lines):
                surface = font.render(text, True, (235, 235, 235))
                screen.blit(surface, (stats_rect.x + 6, stats_rect.y + 6 + i * 20))

            pygame.display.flip()

        pygame.quit()
