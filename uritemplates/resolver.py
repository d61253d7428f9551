"""Resolve request locations from URLs and URI templates."""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from .uritemplate import URITemplate
from .vars import Var, Vars


logger = logging.getLogger(__name__)


def fixup_address(address: str) -> str:
    """Complete a shorthand address: `:8080` or a bare host name."""
    if (address.startswith(':')):
        address = 'http://localhost' + address
    if ((not address) or address.startswith('/')):
        return address
    if (not (address.startswith('http://') or address.startswith('https://'))):
        address = 'http://' + address
    return address


class LocationResolver:
    """
    Collect locations and template variables, and resolve them into URLs.

    Locations are expanded as URI templates once any variable has been added.
    Each location is resolved relative to the one before it, and the first
    relative to the base URL.
    """

    __slots__ = ('locations', 'vars', 'base')

    locations: list[str]
    vars: Vars
    base: (str | None)

    def __init__(self) -> None:
        self.locations = []
        self.vars = Vars()
        self.base = None

    def add(self, location: str) -> None:
        """Add a URL or URI template."""
        self.locations.append(location)

    def add_var(self, *variables: Var) -> None:
        """Add variables applied to templates."""
        self.vars.add(*variables)

    def set_base(self, base: str) -> None:
        """Set the base URL, resolved against any existing base."""
        self.base = urljoin(self.base, base) if (self.base) else base

    def resolve(self) -> list[str]:
        """Expand and resolve all locations."""
        if (self.vars):
            locations = [URITemplate(location).expand(self.vars) for location in self.locations]
        else:
            locations = list(self.locations)

        resolved: list[str] = []
        for index, location in enumerate(locations):
            if (0 == index):
                location = fixup_address(location)
                if (self.base):
                    location = urljoin(self.base, location)
            else:
                location = urljoin(resolved[-1], location)
            logger.debug('resolved location %s', location)
            resolved.append(location)
        return resolved
