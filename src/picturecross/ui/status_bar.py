from typing import List

BAR_COLOR = (24, 24, 24)
TEXT_COLOR = (220, 220, 220)


def status_bar_height(line_px: int, n_lines: int) -> int:
    return line_px * max(1, n_lines) + line_px // 2


def render_status_bar(screen, origin_xy: tuple[int, int], width: int, line_px: int, lines: List[str]) -> None:
    """
    Draw the HUD text rows (see ui.hud.hud_lines) in a dark bar.
    Does not touch game state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    h = status_bar_height(line_px, len(lines))
    pygame.draw.rect(screen, BAR_COLOR, pygame.Rect(ox, oy, width, h))
    font = pygame.font.SysFont(None, max(10, line_px))

    y = oy + line_px // 4
    for text in lines:
        img = font.render(text, True, TEXT_COLOR)
        screen.blit(img, (ox + (width - img.get_width()) // 2, y))
        y += line_px
