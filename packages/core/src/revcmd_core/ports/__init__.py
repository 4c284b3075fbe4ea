from .command import ICommand, IReversibleCommand
from .drawable import IDrawable

__all__ = [
    "ICommand",
    "IDrawable",
    "IReversibleCommand",
]
