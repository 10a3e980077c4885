"""Viewer state machine: Idle -> Fetching -> Success | Error."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .api import PokemonNotFoundError
from .models import PokemonProfile, ViewState, ViewStatus
from .profile import fetch_profile

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Pokemon not found"

ProfileFetcher = Callable[[str], PokemonProfile]


class ProfileSession:
    """Hold the single "current result" slot for one viewer.

    Each search is tagged with an increasing request id. Without the stale
    guard the last search to settle wins, even when an older search settles
    after a newer one; with ``discard_stale=True`` outcomes of superseded
    searches are dropped.
    """

    def __init__(
        self,
        fetcher: Optional[ProfileFetcher] = None,
        discard_stale: bool = False,
    ) -> None:
        self._fetcher = fetcher or fetch_profile
        self.discard_stale = discard_stale
        self._last_request_id = 0
        self.state = ViewState()

    @property
    def last_request_id(self) -> int:
        return self._last_request_id

    def begin(self, query: str) -> int:
        """Start a search and move to the fetching state.

        The previous profile or error stays attached until the search settles.
        """
        self._last_request_id += 1
        request_id = self._last_request_id
        self.state = self.state.model_copy(
            update={"status": ViewStatus.FETCHING, "request_id": request_id, "query": query}
        )
        return request_id

    def settle(
        self,
        request_id: int,
        query: str,
        profile: Optional[PokemonProfile] = None,
        error: Optional[str] = None,
    ) -> ViewState:
        """Install the outcome of a search.

        Args:
            request_id: Id returned by ``begin`` for this search.
            query: The query the search ran for.
            profile: The profile, on success.
            error: The user-visible message, on failure.

        Returns:
            The current state after applying (or discarding) the outcome.

        Raises:
            ValueError: If both or neither of profile and error are given.
        """
        if (profile is None) == (error is None):
            raise ValueError("settle() takes exactly one of profile or error")
        if self.discard_stale and request_id < self._last_request_id:
            logger.debug(
                "Discarding stale result for request %d (latest is %d)",
                request_id,
                self._last_request_id,
            )
            return self.state

        if profile is not None:
            self.state = ViewState(
                status=ViewStatus.SUCCESS, request_id=request_id, query=query, profile=profile
            )
        else:
            self.state = ViewState(
                status=ViewStatus.ERROR, request_id=request_id, query=query, error=error
            )
        return self.state

    def complete(self, request_id: int, query: str) -> ViewState:
        """Run the fetcher for a search started with ``begin`` and settle it."""
        try:
            profile = self._fetcher(query)
        except PokemonNotFoundError as exc:
            logger.warning("Lookup for %r failed: %s", query, exc)
            return self.settle(request_id, query, error=NOT_FOUND_MESSAGE)
        return self.settle(request_id, query, profile=profile)

    def search(self, query: str) -> ViewState:
        """Run a complete lookup and return the resulting state."""
        return self.complete(self.begin(query), query)

    def reset(self) -> ViewState:
        """Drop the current result and return to the idle state."""
        self.state = ViewState(request_id=self._last_request_id)
        return self.state
