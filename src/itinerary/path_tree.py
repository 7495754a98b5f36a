import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from .exceptions import UnknownCityError

# Cost and hop sentinel for vertices a search has not reached.
UNREACHED = sys.maxsize
UNSET_TIME = -1


@dataclass
class CityState:
    """
    Per-search state for one city.

    best_cost and best_hops only decrease while a search runs. parent is
    the code of the previous city on the best known path, None for the
    search source and for unreached cities.
    """

    best_cost: int = UNREACHED
    best_hops: int = UNREACHED
    visited: bool = False
    parent: Optional[str] = None
    arrival_gmt: int = UNSET_TIME
    departure_from_parent_gmt: int = UNSET_TIME


class PathTree:
    """
    Side table of search state, keyed by city code.

    Every search run builds a fresh tree, so there is no reset step to
    forget and independent queries never share state. The parent links
    form a tree rooted at `source`.
    """

    def __init__(self, source: str, codes: Iterable[str]) -> None:
        self.source = source
        self.finalized = 0
        self._states: Dict[str, CityState] = {code: CityState() for code in codes}
        if source not in self._states:
            raise UnknownCityError(source, "search graph")

    def __getitem__(self, code: str) -> CityState:
        try:
            return self._states[code]
        except KeyError:
            raise UnknownCityError(code, "search graph") from None

    def __contains__(self, code: object) -> bool:
        return code in self._states

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def is_reachable(self, code: str) -> bool:
        state = self[code]
        return state.best_cost != UNREACHED or state.best_hops != UNREACHED

    def chain_from(self, code: str) -> List[str]:
        """Codes from `code` back along parent links, ending at a root."""
        chain = [code]
        parent = self[code].parent
        while parent is not None:
            chain.append(parent)
            parent = self[parent].parent
        return chain

    def path_to(self, code: str) -> Optional[List[str]]:
        """
        Codes from the source to `code`, or None if the search never
        reached it.
        """
        if not self.is_reachable(code):
            return None
        return list(reversed(self.chain_from(code)))

    def reached(self) -> List[str]:
        return [code for code in self._states if self.is_reachable(code)]
