"""Registry of JWK to key pair conversion handlers."""

import logging
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from did_jwk.constants import CURVES_BY_ALGORITHM
from did_jwk.resolver import InvalidArgument

LOG = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], Union[Any, Awaitable[Any]]]

# JWK members consulted for a handler, in priority order
LOOKUP_MEMBERS = ("alg", "crv")


class HandlerRegistry:
    """Map JWK algorithms and curves to key pair handlers.

    A handler is called with a verification method dict and returns a key pair
    object, or an awaitable resolving to one.

    Registration is not synchronized; register handlers before resolving.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._handlers: "OrderedDict[str, Handler]" = OrderedDict()

    def __len__(self) -> int:
        """Return the number of registered keys."""
        return len(self._handlers)

    def __contains__(self, key: object) -> bool:
        """Return whether a handler is registered under key."""
        return key in self._handlers

    @property
    def is_empty(self) -> bool:
        """Return whether no handler is registered."""
        return not self._handlers

    def register(self, alg_or_crv: str, handler: Handler):
        """Register a handler for a JWK alg or crv value.

        Registering an algorithm also registers the curves it implies, unless
        a handler is already present for such a curve.
        """
        if not isinstance(alg_or_crv, str) or not alg_or_crv:
            raise InvalidArgument("alg_or_crv must be a non-empty string")
        if not callable(handler):
            raise InvalidArgument("handler must be callable")

        LOG.debug("registering key pair handler for %s", alg_or_crv)
        self._handlers[alg_or_crv] = handler
        for curve in CURVES_BY_ALGORITHM.get(alg_or_crv, ()):
            if curve not in self._handlers:
                LOG.debug("registering %s handler for curve %s", alg_or_crv, curve)
                self._handlers[curve] = handler

    def register_all(self, handlers: Mapping[str, Handler]):
        """Register each handler of a mapping in order."""
        for alg_or_crv, handler in handlers.items():
            self.register(alg_or_crv, handler)

    def resolve(self, jwk: Mapping[str, Any]) -> Optional[Handler]:
        """Return the handler for a JWK, trying alg then crv."""
        for member in LOOKUP_MEMBERS:
            value = jwk.get(member)
            if isinstance(value, str) and value in self._handlers:
                return self._handlers[value]
        return None
