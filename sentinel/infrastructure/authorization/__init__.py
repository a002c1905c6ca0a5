"""Authorization infrastructure package.

- sentinel.py: Sentinel implementing AuthorizationProtocol
"""

from sentinel.infrastructure.authorization.sentinel import Sentinel

__all__ = ["Sentinel"]
