from spirograph.app.ui.panels.base import BasePanel
from spirograph.app.ui.panels.parameters import ParameterPanel

__all__ = ["BasePanel", "ParameterPanel"]
