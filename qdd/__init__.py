"""N-Queens solved incrementally with decision diagrams."""
try:
    from ._version import version as __version__
except ImportError:
    __version__ = None
from qdd import autoref as _bdd
from qdd import game as _game
BDD = _bdd.BDD
Game = _game.Game
