import subprocess
import webbrowser
from datetime import datetime
from platform import uname

from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieShelf.settings import LOG_PATH, ACCENT_COLOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().isoformat(timespec="seconds")
    with LOG_PATH.open("a", encoding="utf-8") as f:
        f.write(f"[{ts}] {message}\n")


def elide(text: str, limit: int = 160) -> str:
    """Cut *text* to *limit* characters, ending with an ellipsis if shortened."""
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


_DARK_ROLES = {
    QPalette.Window:          "#1c1d20",
    QPalette.WindowText:      "#f1f1f1",
    QPalette.Base:            "#26272a",
    QPalette.AlternateBase:   "#2f3034",
    QPalette.ToolTipBase:     "#26272a",
    QPalette.ToolTipText:     "#f1f1f1",
    QPalette.Button:          "#2a2b2e",
    QPalette.ButtonText:      "#f1f1f1",
    QPalette.Text:            "#f1f1f1",
    QPalette.PlaceholderText: "#8a8b8f",
    QPalette.HighlightedText: "#ffffff",
}


def dark_palette(accent: str = ACCENT_COLOR) -> QPalette:
    """Dark palette for the shelf; links and selections use *accent*."""
    palette = QPalette()
    for role, color in _DARK_ROLES.items():
        palette.setColor(role, QColor(color))
    for role in (QPalette.Link, QPalette.Highlight):
        palette.setColor(role, QColor(accent))
    # greyed-out text for disabled buttons while a fetch is running
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, QColor("#6b6c70"))
    return palette


def apply_dark_palette(app: QApplication) -> None:
    """Switch *app* to Fusion with the shelf's dark palette."""
    app.setStyle("Fusion")
    app.setPalette(dark_palette())


def open_url_host_browser(url: str) -> None:
    """Opens *url* with host OS default browser (WSL-aware)."""
    if "microsoft-standard" in uname().release.lower():
        subprocess.Popen(["powershell.exe", "-c", f"Start-Process '{url}'"])
    else:
        webbrowser.open(url)
