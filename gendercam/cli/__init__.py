from .live import run_live
from .menu import run_menu, MENU

__all__ = ['run_live', 'run_menu', 'MENU']
