"""locale_overlay: overlay translated text onto host locale tables."""

__all__ = [
    "__version__",
    "run_overlay",
    "overlay_tables",
    "OverlayConfig",
    "OverlayHost",
    "OverlayReport",
    "LazyLocaleTable",
    "DialogueElement",
    "MergeStrategy",
]
__version__ = "1.1.1"

from locale_overlay.api import overlay_tables  # noqa: E402, F401
from locale_overlay.core.config import OverlayConfig  # noqa: E402, F401
from locale_overlay.core.host import OverlayHost  # noqa: E402, F401
from locale_overlay.core.merge import LazyLocaleTable  # noqa: E402, F401
from locale_overlay.core.runner import run_overlay  # noqa: E402, F401
from locale_overlay.model import MergeStrategy  # noqa: E402, F401
from locale_overlay.model.dialogue import DialogueElement  # noqa: E402, F401
from locale_overlay.model.run_result import OverlayReport  # noqa: E402, F401
