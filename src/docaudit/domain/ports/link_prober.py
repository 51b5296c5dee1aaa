"""Port: decide whether an external link is reachable."""

from abc import ABC, abstractmethod

from docaudit.domain.models.links import LinkResult


class LinkProberPort(ABC):
    """Contract for classifying a single URL."""

    @abstractmethod
    def probe(self, url: str) -> LinkResult:
        """Return the verdict for *url*.

        Implementations never raise for an unreachable target; network
        failures are reported as an ``unreachable`` verdict. Must be safe
        to call from several threads at once.
        """
        ...
