from .bar import Bar
from .tools import AlgorithmSelectorWidget

__all__ = [
    "Bar",
    "AlgorithmSelectorWidget",
]
