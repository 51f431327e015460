"""toolbox

Shared building blocks for business code. The centrepiece is `Outcome`, an
immutable success/failure value that operations return instead of raising
or returning None.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
