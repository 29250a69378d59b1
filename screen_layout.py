Rect = tuple[int, int, int, int]  # (y, x, h, w)


class ScreenLayout:
    """Splits the screen into title, pair list and footer, plus centered popups."""

    TITLE_H = 3
    FOOTER_H = 3
    POPUP_PCT_X = 60
    POPUP_PCT_Y = 25

    def __init__(self, height: int, width: int):
        self.H = max(0, height)
        self.W = max(0, width)

        # layout: title (3 lines), pair list (rest), footer (3 lines)
        self.title_h = min(self.TITLE_H, self.H)
        self.footer_h = min(self.FOOTER_H, max(0, self.H - self.title_h))
        self.list_h = max(0, self.H - self.title_h - self.footer_h)

        self.title_rect: Rect = (0, 0, self.title_h, self.W)
        self.list_rect: Rect = (self.title_h, 0, self.list_h, self.W)
        self.footer_rect: Rect = (self.title_h + self.list_h, 0, self.footer_h, self.W)

        self.popup_rect: Rect = self.centered_rect(self.POPUP_PCT_X, self.POPUP_PCT_Y)

    @classmethod
    def from_window(cls, win) -> "ScreenLayout":
        h, w = win.getmaxyx()
        return cls(h, w)

    def centered_rect(self, pct_x: int, pct_y: int) -> Rect:
        pct_x = max(0, min(100, pct_x))
        pct_y = max(0, min(100, pct_y))
        h = self.H * pct_y // 100
        w = self.W * pct_x // 100
        y = (self.H - h) // 2
        x = (self.W - w) // 2
        return (y, x, h, w)

    def popup_halves(self) -> tuple[Rect, Rect]:
        """Left and right boxes inside the popup (key box, value box)."""
        y, x, h, w = self.popup_rect
        # one cell of popup border on each side
        inner_y, inner_x = y + 1, x + 1
        inner_h, inner_w = max(0, h - 2), max(0, w - 2)
        left_w = inner_w // 2
        right_w = inner_w - left_w
        return (
            (inner_y, inner_x, inner_h, left_w),
            (inner_y, inner_x + left_w, inner_h, right_w),
        )
